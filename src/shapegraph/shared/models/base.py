"""
Base models for shapegraph value types.
"""

from pydantic import BaseModel as PydanticBaseModel


class BaseModel(PydanticBaseModel):
    """
    Base model for shapegraph value types.

    Value types are immutable: once built, a point or bounds never changes,
    so they can be shared between shapes and used as dictionary keys.
    """

    model_config = {
        # Allow field population by name or alias
        "populate_by_name": True,
        # Value types are immutable and hashable
        "frozen": True,
        # Reject unknown fields
        "extra": "forbid",
    }
