"""
Stencil descriptors naming the semantic kind of a shape.
"""

from typing import Any, Dict, Optional
from pydantic import Field, field_validator

from .base import BaseModel


class StencilType(BaseModel):
    """Stencil identifier of a shape, e.g. ``Task`` or ``Association_Bidirectional``."""

    id: str = Field(..., description="Stencil identifier")

    def __init__(self, id: str, **data: Any) -> None:
        super().__init__(id=id, **data)

    @field_validator('id')
    @classmethod
    def validate_id(cls, v):
        if not v or not v.strip():
            raise ValueError("Stencil id cannot be empty")
        return v

    def to_dict(self) -> Dict[str, str]:
        return {'id': self.id}


class StencilSet(BaseModel):
    """Reference to the stencil set a diagram was drawn with."""

    url: str = Field(..., description="Location of the stencil set definition")
    namespace: Optional[str] = Field(default=None, description="Stencil set namespace URI")

    def to_dict(self) -> Dict[str, str]:
        data = {'url': self.url}
        if self.namespace is not None:
            data['namespace'] = self.namespace
        return data
