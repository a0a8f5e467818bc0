"""Shared Pydantic base model."""

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """Base for all API schemas.

    Fields are exposed in camelCase (``mobile_number`` -> ``mobileNumber``)
    while still accepting the snake_case names on input.
    """

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "from_attributes": True,
    }
