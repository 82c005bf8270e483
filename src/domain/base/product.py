"""Base product model - foundation for every constructed or cloned object."""
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict


class Product(BaseModel):
    """
    Base class for products handed out by builders and factories.

    Products are frozen: once handed off, fields cannot be reassigned.
    """
    model_config = ConfigDict(
        frozen=True,
        validate_assignment=True,
        use_enum_values=False,
        extra="forbid",
    )

    def to_dict(self) -> Dict[str, Any]:
        """Convert product to a plain dictionary."""
        return self.model_dump(mode="python")
