"""A base class for values that carry their own validity state."""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from typing import Any, Callable, ClassVar, Generic, Optional, TypeVar

T = TypeVar("T")

ValidatorFn = Callable[[Any], bool]


class Validated(ABC, Generic[T]):
    """A wrapped value that knows whether it is valid and why not.

    Subclasses supply the default rules through ``_check``. An external
    validator can be installed per class; it takes priority over the rules.
    """

    _external_validator: ClassVar[Optional[ValidatorFn]] = None

    def __init__(
        self,
        content: T,
        valid: bool = False,
        error: Optional[Exception] = None,
    ) -> None:
        self._content = content
        self._valid = valid
        self._error = error

    @abstractmethod
    def _check(self, value: T) -> Optional[Exception]:
        """Apply the default rules; return the problem found, or None."""

    def _invalid_error(self) -> Exception:
        return ValueError(f"{self.type_name()} is not valid")

    def __str__(self) -> str:
        return str(self._content)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._content!r})"

    def value_or_raise(self) -> T:
        """Return the value, or raise the reason it is not valid."""
        if self.is_valid():
            return self._content
        raise self._error if self._error is not None else self._invalid_error()

    def value_or(self, default: T) -> T:
        """Return the value if valid, otherwise ``default``."""
        return self._content if self.is_valid() else default

    def error(self) -> Optional[Exception]:
        """Return the reason the value is not valid, or None."""
        return None if self._valid else self._error

    def is_valid(self) -> bool:
        return self._valid

    def compare(self, other: object) -> bool:
        """Tell whether ``other`` holds the same value."""
        return isinstance(other, Validated) and str(self) == str(other)

    def contains(self, s: str) -> bool:
        return s in str(self)

    def equal_to(self, other: T) -> bool:
        return self._content == other

    def clone(self):
        """Return an independent instance with the same state."""
        return copy.copy(self)

    def type_name(self) -> str:
        return type(self).__name__

    def validate(self) -> None:
        """Check the value, with the external validator if one is set."""
        external = self.validator()
        if external is not None:
            self._valid = bool(external(self._content))
            self._error = None if self._valid else self._invalid_error()
            return
        problem = self._check(self._content)
        self._valid = problem is None
        self._error = problem

    def validator(self) -> Optional[ValidatorFn]:
        """Return the external validator, or None when the rules apply."""
        return type(self)._external_validator

    def default_validator(self) -> ValidatorFn:
        """Return a predicate applying the default rules to any value."""
        return lambda value: self._check(value) is None

    def is_default_validator(self) -> bool:
        return self.validator() is None

    def is_external_validator(self) -> bool:
        return self.validator() is not None

    def set_validator(self, fn: ValidatorFn) -> None:
        """Install ``fn`` as the external validator for this class."""
        type(self)._external_validator = fn

    def clear_validator(self) -> None:
        """Remove the external validator so the default rules apply."""
        type(self)._external_validator = None

    def to_dto(self) -> dict:
        """Return a plain dictionary describing the value and its state."""
        problem = self.error()
        return {
            "content": self._content,
            "valid": self._valid,
            "error": None if problem is None else str(problem),
        }