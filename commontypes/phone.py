"""Telephone numbers split into country, destination and subscriber parts."""

from __future__ import annotations

from dataclasses import dataclass


def _whole_number(phone: str, part: str) -> str:
    """Check that ``phone`` is a string and return it whole as ``part``."""
    if not isinstance(phone, str):
        raise TypeError(f"{part} must be taken from a str, not {type(phone).__name__}")
    return phone


def phone_cc(phone: str) -> str:
    """Return the country-code part of a number; the number is kept whole."""
    return _whole_number(phone, "country code")


def phone_ndc(phone: str) -> str:
    """Return the national-destination-code part; the number is kept whole."""
    return _whole_number(phone, "national destination code")


def phone_sn(phone: str) -> str:
    """Return the subscriber-number part; the number is kept whole."""
    return _whole_number(phone, "subscriber number")


@dataclass
class Phone:
    """A telephone number in its three E.164 parts."""

    subscriber_number: str
    national_destination_code: str
    country_code: str

    @classmethod
    def from_number(cls, number: str) -> "Phone":
        """Build a phone from a single number string."""
        return cls(
            subscriber_number=phone_sn(number),
            national_destination_code=phone_ndc(number),
            country_code=phone_cc(number),
        )