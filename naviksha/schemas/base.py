"""Base Pydantic schemas for the Naviksha career match engine."""

from pydantic import BaseModel


class BaseSchema(BaseModel):
    """Base schema with common configuration."""

    model_config = {
        "use_enum_values": True,
        "validate_assignment": True,
        "arbitrary_types_allowed": False,
        "str_strip_whitespace": True,
        "populate_by_name": True,
    }


class FrozenSchema(BaseSchema):
    """Immutable value object schema."""

    model_config = {
        **BaseSchema.model_config,
        "frozen": True,
    }
