import pytest

from commontypes.email_address import (
    Email,
    EmailEmpty,
    EmailError,
    EmailInvalid,
    EmailNotValidated,
    InvalidEmailDomain,
    InvalidEmailFormat,
    clear_external_validator,
    new_email_with_validation,
    set_external_validator,
)


@pytest.fixture(autouse=True)
def _reset_validator():
    yield
    clear_external_validator()


def mock_validator(s: str) -> bool:
    return "inc.com" not in s


def test_empty():
    e = Email("")
    assert e.value_or("default") == "default"
    with pytest.raises(EmailError):
        e.value_or_raise()
    assert isinstance(e.error(), EmailEmpty)


def test_valid():
    e = Email("test@example.com")
    e.validate()
    assert e.value_or("default") == "test@example.com"
    assert e.value_or_raise() == "test@example.com"
    assert e.error() is None


def test_invalid():
    e = Email("invalid-email")
    e.validate()
    assert e.value_or("default") == "default"
    assert isinstance(e.error(), InvalidEmailFormat)
    with pytest.raises(InvalidEmailFormat):
        e.value_or_raise()


def test_compare():
    e1 = Email("test@example.com")
    e2 = Email("test@example.com")
    e3 = Email("different@example.com")
    assert e1.compare(e2) is True
    assert e1.compare(e3) is False
    assert e1.compare("test@example.com") is False


def test_clone():
    e = Email("test@example.com")
    e.validate()
    clone = e.clone()
    assert str(clone) == str(e)
    assert clone.is_valid() == e.is_valid()
    assert clone.error() == e.error()
    assert clone is not e


def test_not_validated_until_used():
    e = Email("test@example.com")
    assert isinstance(e.error(), EmailNotValidated)
    assert e.is_valid() is True
    assert e.error() is None


def test_is_empty():
    assert Email("").is_empty() is True
    assert Email("test@example.com").is_empty() is False


def test_contains():
    e = Email("test@example.com")
    assert e.contains("test") is True
    assert e.contains("example") is True
    assert e.contains("missing") is False


def test_contains_at():
    assert Email("test@example.com").contains_at() is True
    assert Email("testexample.com").contains_at() is False


def test_has_valid_domain():
    assert Email("test@example.com").has_valid_domain() is True
    assert Email("test@example").has_valid_domain() is False


def test_has_correct_length():
    assert Email("a@b.c").has_correct_length() is True
    assert Email("a@b.c" + "\0" * 250).has_correct_length() is False
    assert Email("a@b").has_correct_length() is False


def test_missing_domain_is_reported():
    e = Email("test@example")
    e.validate()
    assert isinstance(e.error(), InvalidEmailDomain)
    assert e.is_valid() is False


def test_equal_to_and_type_name():
    e = Email("test@example.com")
    assert e.equal_to("test@example.com") is True
    assert e.equal_to("other@example.com") is False
    assert e.type_name() == "Email"


def test_as_used_with_external_validator():
    foo = Email("foo@example.com")
    bar = Email("bar@example.com")
    assert foo.compare(bar) is False
    assert foo.is_valid() is True
    assert bar.is_valid() is True

    troll = Email("troll")
    assert troll.is_valid() is False

    assert mock_validator("foo") is True
    assert mock_validator("inc.com") is False

    set_external_validator(mock_validator)
    assert foo.validator() is mock_validator

    foo.validate()
    assert foo.is_valid() is False
    assert isinstance(foo.error(), EmailInvalid)


def test_clear_external_validator_restores_rules():
    set_external_validator(mock_validator)
    clear_external_validator()
    e = Email("test@example.com")
    assert e.validator() is None
    assert e.is_valid() is True


def test_new_email_with_validation():
    e = new_email_with_validation("test@example.com")
    assert e.value_or_raise() == "test@example.com"
    with pytest.raises(InvalidEmailFormat):
        new_email_with_validation("invalid-email")
    with pytest.raises(EmailEmpty):
        new_email_with_validation("")


def test_error_messages():
    assert str(EmailEmpty()) == "email cannot be empty"
    assert str(InvalidEmailFormat()) == "invalid email format"
    assert str(EmailInvalid()) == "email is invalid"