"""E-mail addresses with lazy validation."""

from __future__ import annotations

from typing import Callable, Optional

from commontypes.base import Validated

MIN_LENGTH = 5  # x@x.x
MAX_LENGTH = 254


class EmailError(ValueError):
    """Base class for e-mail address problems."""

    default_message = "email error"

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message or self.default_message)


class InvalidEmailFormat(EmailError):
    default_message = "invalid email format"


class EmailEmpty(EmailError):
    default_message = "email cannot be empty"


class EmailInvalid(EmailError):
    default_message = "email is invalid"


class EmailNotValidated(EmailError):
    default_message = "email has not been validated yet"


class EmailTooLong(EmailError):
    default_message = f"email exceeds maximum length of {MAX_LENGTH} characters"


class EmailTooShort(EmailError):
    default_message = "email is too short"


class InvalidEmailLength(EmailError):
    default_message = "invalid email length"


class InvalidEmailDomain(EmailError):
    default_message = "invalid email domain"


class Email(Validated[str]):
    """An e-mail address, validated on first use."""

    def __init__(self, address: str) -> None:
        super().__init__(address, valid=False, error=EmailNotValidated())

    def __str__(self) -> str:
        return self._content

    def _invalid_error(self) -> Exception:
        return EmailInvalid()

    def _check(self, value: str) -> Optional[Exception]:
        if not value:
            return EmailEmpty()
        if "@" not in value:
            return InvalidEmailFormat()
        if "." not in value:
            return InvalidEmailDomain()
        return None

    def value_or_raise(self) -> str:
        """Return the address, raising its error if it is not valid."""
        if not self.is_valid():
            raise self._error if self._error is not None else EmailInvalid()
        return self._content

    def value_or(self, default: str) -> str:
        """Return the address, or ``default`` if it is not valid."""
        return self._content if self.is_valid() else default

    def is_valid(self) -> bool:
        """Tell whether the address is valid, validating it if never done."""
        if isinstance(self._error, EmailNotValidated):
            self.validate()
        return self._valid

    def error(self) -> Optional[Exception]:
        return self._error

    def compare(self, other: object) -> bool:
        return isinstance(other, Email) and self._content == other._content

    def contains(self, s: str) -> bool:
        return s in self._content

    def equal_to(self, other: str) -> bool:
        return self._content == other

    def clone(self) -> "Email":
        """Return a new address carrying the same state."""
        copy = Email(self._content)
        copy._valid = self._valid
        copy._error = self._error
        return copy

    def type_name(self) -> str:
        return "Email"

    def validator(self) -> Optional[Callable[[str], bool]]:
        """Return the external validator, or None when the default rules apply."""
        return getattr(type(self), "_external_validator", None)

    def validate(self) -> None:
        """Check the address; an external validator takes priority."""
        external = self.validator()
        if external is not None:
            external(self._content)
            # Whatever the external verdict, the address ends up rejected.
            self._valid = False
            self._error = EmailInvalid()
            return
        problem = self._check(self._content)
        self._valid = problem is None
        self._error = problem

    def is_empty(self) -> bool:
        return self._content == ""

    def contains_at(self) -> bool:
        return "@" in self._content

    def has_valid_domain(self) -> bool:
        return "." in self._content

    def has_correct_length(self) -> bool:
        return MIN_LENGTH <= len(self._content.encode("utf-8")) <= MAX_LENGTH


def new_email_with_validation(address: str) -> Email:
    """Build an address and validate it, raising if it is not valid."""
    email = Email(address)
    email.validate()
    if email.error() is not None:
        raise email.error()
    return email


def set_external_validator(fn: Callable[[str], bool]) -> None:
    """Install a validator that overrides the default e-mail rules."""
    Email._external_validator = fn


def clear_external_validator() -> None:
    """Return to the default e-mail rules."""
    Email._external_validator = None