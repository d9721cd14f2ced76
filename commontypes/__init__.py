"""Self-validating value types: a base class, e-mail addresses and phone numbers."""

__version__ = "0.1.0"
__all__ = ["base", "email_address", "phone"]