"""Prototype base model - deep-copy duplication of domain objects."""
from __future__ import annotations

import copy
from typing import Any, Dict, List, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError

from src.domain.core.exceptions import InvalidCloneSourceError, ValidationError

T = TypeVar("T", bound="PrototypeModel")


class PrototypeModel(BaseModel):
    """
    Base class for objects that can duplicate themselves.

    ``clone()`` returns an instance of the same concrete class whose nested
    mutable containers (lists, dicts, sets) are newly allocated, so the
    original and the clone can be edited independently. Immutable values
    may be shared.
    """
    model_config = ConfigDict(
        frozen=False,  # Prototypes are edited after cloning
        validate_assignment=True,
        arbitrary_types_allowed=True,
    )

    def _missing_required_fields(self) -> List[str]:
        present = self.__dict__
        return [
            name
            for name, field in type(self).model_fields.items()
            if field.is_required() and name not in present
        ]

    def validate_clone_source(self) -> None:
        """
        Check that this object is in a valid state to copy.

        Raises:
            InvalidCloneSourceError: If required fields are missing or current
                values no longer validate (e.g. a partially constructed object
                or one whose containers hold invalid entries)
        """
        source_type = type(self).__name__
        missing = self._missing_required_fields()
        if missing:
            raise InvalidCloneSourceError(
                source_type, f"missing required fields {', '.join(missing)}"
            )
        try:
            type(self).model_validate(self.model_dump(mode="python"))
        except PydanticValidationError as e:
            raise InvalidCloneSourceError(source_type, str(e)) from e

    def clone(self: T, **updates: Any) -> T:
        """
        Return a deep copy of this object.

        Args:
            **updates: Field values applied to the clone only

        Raises:
            InvalidCloneSourceError: If this object cannot be copied
            ValidationError: If an update names an unknown field or fails
                validation; the source is left untouched
        """
        self.validate_clone_source()
        duplicate = self.model_copy(deep=True)
        for name, value in updates.items():
            if name not in type(self).model_fields:
                raise ValidationError(
                    f"{type(self).__name__} has no field '{name}'", {"field": name}
                )
            try:
                # validate_assignment checks each update
                setattr(duplicate, name, copy.deepcopy(value))
            except PydanticValidationError as e:
                raise ValidationError(
                    f"Invalid value for {type(self).__name__}.{name}: {value!r}",
                    {"field": name, "errors": e.errors()},
                ) from e
        return duplicate

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="python")
