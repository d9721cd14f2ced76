# commontypes

Small value types that know whether their content is valid. Each type keeps
its raw value and its validation state, and gives that value back only once
validation has passed.

## Installation

```
pip install commontypes
```

## E-mail addresses

```python
from commontypes.email_address import (
    Email,
    InvalidEmailFormat,
    new_email_with_validation,
)

email = Email("someone@example.com")
email.is_valid()              # True; validates on first use
email.value_or("fallback")    # "someone@example.com"
email.value_or_raise()        # "someone@example.com"

bad = Email("not-an-address")
bad.validate()
bad.value_or("fallback")      # "fallback"
isinstance(bad.error(), InvalidEmailFormat)  # True
bad.value_or_raise()          # raises InvalidEmailFormat
```

A new `Email` starts out unvalidated: its `error()` is an
`EmailNotValidated`, and the first call to `is_valid()`, `value_or()` or
`value_or_raise()` runs `validate()`.

`new_email_with_validation(address)` builds an `Email`, validates it at once
and raises its error if it is not valid.

The default rules check, in order, that the address is not empty
(`EmailEmpty`), contains `@` (`InvalidEmailFormat`) and contains a `.`
(`InvalidEmailDomain`). Length is not part of validation; use
`has_correct_length()` to check for 5 to 254 bytes of UTF-8.

All errors derive from `EmailError`, itself a `ValueError`. The classes
`EmailInvalid`, `EmailTooLong`, `EmailTooShort` and `InvalidEmailLength` are
also defined.

### External validator

`set_external_validator(fn)` installs a process-wide function for `Email`, and
`clear_external_validator()` removes it. While one is set, `validate()` calls
it with the address but then marks the address invalid with `EmailInvalid`
whatever it returns. `validator()` returns the installed function, or `None`
when the default rules apply.

Other helpers: `compare` (another `Email` with the same address), `equal_to`
(a plain string), `contains`, `contains_at`, `has_valid_domain`,
`has_correct_length`, `is_empty`, `clone` and `type_name`.

## Phone numbers

```python
from commontypes.phone import Phone

phone = Phone("1234", "12", "1")
phone.subscriber_number           # "1234"

same = Phone.from_number("1234")
same.country_code                 # "1234"
```

`Phone` is a dataclass with `subscriber_number`, `national_destination_code`
and `country_code`. The helpers `phone_cc`, `phone_ndc` and `phone_sn`, used
by `Phone.from_number`, return the whole number unchanged for each part, and
raise `TypeError` for anything that is not a `str`.

## Writing your own types

`commontypes.base.Validated` is an abstract base class. A subclass implements
`_check(value)`, returning an exception describing the problem or `None`.
The base class provides `value_or`, `value_or_raise`, `error`, `is_valid`,
`compare`, `equal_to`, `contains`, `clone`, `type_name` and `validate`. It also
provides `validator`, `default_validator`, `is_default_validator`,
`is_external_validator`, `set_validator` and `clear_validator`, which manage an
external validator per class that takes priority over `_check`. `to_dto()`
returns a dictionary with `content`, `valid` and `error` keys.

## What it does not do

- Phone numbers are not parsed. No part is split out of a number string, and
  phone numbers are not validated.
- There is no postal-address type and no command-line tool.

## Running the tests

```
pip install -e ".[test]"
pytest
```