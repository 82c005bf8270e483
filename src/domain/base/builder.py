"""Builder contract and build specification value objects."""
from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Generic, Iterable, List, Mapping, Optional, Tuple, Type, TypeVar, Union

from src.domain.core.exceptions import IncompleteProductError, ValidationError

P = TypeVar("P")


@dataclass(frozen=True)
class BuildStep:
    """One step of a build: a step identifier plus an optional explicit value."""
    name: str
    value: Optional[Any] = None

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValidationError("Build step name must be a non-empty string")
        object.__setattr__(self, "name", self.name.strip())

    def __str__(self) -> str:
        if self.value is None:
            return self.name
        return f"{self.name}={self.value!r}"


StepLike = Union[BuildStep, str, Mapping[str, Any]]


@dataclass(frozen=True)
class BuildSpec:
    """Ordered sequence of build steps played by a Director against a Builder."""
    steps: Tuple[BuildStep, ...] = ()

    def __post_init__(self):
        if not isinstance(self.steps, tuple):
            object.__setattr__(self, "steps", tuple(self.steps))
        for step in self.steps:
            if not isinstance(step, BuildStep):
                raise ValidationError(f"Invalid build step: {step!r}")

    @classmethod
    def of(cls, *steps: StepLike) -> BuildSpec:
        return cls.parse(steps)

    @classmethod
    def parse(cls, steps: Union[BuildSpec, Iterable[StepLike]]) -> BuildSpec:
        """
        Build a spec from step names, ``{"step": ..., "value": ...}`` mappings
        or BuildStep objects.
        """
        if isinstance(steps, BuildSpec):
            return steps
        if isinstance(steps, (str, bytes)) or isinstance(steps, Mapping):
            raise ValidationError("A build spec must be a sequence of steps")

        parsed: List[BuildStep] = []
        for raw in steps:
            if isinstance(raw, BuildStep):
                parsed.append(raw)
            elif isinstance(raw, str):
                parsed.append(BuildStep(raw))
            elif isinstance(raw, Mapping):
                if "step" not in raw:
                    raise ValidationError(f"Build step mapping needs a 'step' key: {dict(raw)!r}")
                parsed.append(BuildStep(raw["step"], raw.get("value")))
            else:
                raise ValidationError(f"Invalid build step: {raw!r}")
        return cls(tuple(parsed))

    @property
    def step_names(self) -> List[str]:
        return [step.name for step in self.steps]

    def __iter__(self):
        return iter(self.steps)

    def __len__(self) -> int:
        return len(self.steps)

    def __str__(self) -> str:
        return " -> ".join(str(step) for step in self.steps)


class Builder(ABC, Generic[P]):
    """
    Capability contract for builders.

    A builder accumulates product state in a private draft through discrete
    step calls and hands out finished products from ``build()``.

    Repeated ``build()`` calls each return a new product made from a deep
    snapshot of the draft, so products never share mutable state with each
    other or with the builder. The draft survives ``build()``; call
    ``reset()`` to start over.
    """

    product_type: Type[P]
    required_fields: Tuple[str, ...] = ()

    def __init__(self) -> None:
        self._draft: Dict[str, Any] = {}

    @abstractmethod
    def supported_steps(self) -> Tuple[str, ...]:
        """Step identifiers this builder understands, in canonical order."""

    @abstractmethod
    def apply_step(self, step: str, value: Optional[Any] = None) -> Builder[P]:
        """Run a single step. ``value`` of None means the builder's own value."""

    @abstractmethod
    def _create_product(self, fields: Dict[str, Any]) -> P:
        """Create the product from a snapshot of the draft."""

    def supports(self, step: str) -> bool:
        return step in self.supported_steps()

    def missing_fields(self) -> List[str]:
        return [name for name in self.required_fields if self._draft.get(name) is None]

    def is_complete(self) -> bool:
        return not self.missing_fields()

    def reset(self) -> Builder[P]:
        self._draft = {}
        return self

    def build(self) -> P:
        """
        Return the finished product.

        Raises:
            IncompleteProductError: If required fields are unset
        """
        missing = self.missing_fields()
        if missing:
            raise IncompleteProductError(self.product_type.__name__, missing)
        return self._create_product(copy.deepcopy(self._draft))
