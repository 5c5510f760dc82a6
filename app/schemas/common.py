# app/schemas/common.py
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """
    Base for every payload exchanged with clients.

    - JSON keys are camelCase (totalAmount, shippingAddress, ...)
    - snake_case names are accepted too, so services can validate
      plain dicts produced by the resolver
    - read models can be built straight from table rows
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class RequestModel(ApiModel):
    """Base for request bodies: unknown keys are rejected."""

    model_config = ConfigDict(extra="forbid")


class MessageResponse(ApiModel):
    message: str
