# validkit

Validation checks for common kinds of values, together with structured,
nestable validation errors.

## Installation

```
pip install validkit
```

The only runtime dependency is `idna`, used for internationalised domain
names in e-mail addresses and URLs.

## Validation checks

Each check takes a value and returns `True` or `False`.

| Function                                                        | Module                                      |
| --------------------------------------------------------------- | ------------------------------------------- |
| `validate_email(value)`                                         | `validkit.validation.email`                 |
| `validate_url(value)`                                           | `validkit.validation.urls`                  |
| `validate_ip(value)`, `validate_ipv4(value)`, `validate_ipv6(value)` | `validkit.validation.ip`               |
| `validate_length(value, min, max, equal)`                       | `validkit.validation.length`                |
| `validate_range(value, min, max, exclusive_min, exclusive_max)` | `validkit.validation.range`                 |
| `validate_contains(value, needle)`                              | `validkit.validation.contains`              |
| `validate_does_not_contain(value, needle)`                      | `validkit.validation.contains`              |
| `validate_regex(value, pattern)`, `as_regex(pattern)`           | `validkit.validation.regex`                 |
| `validate_must_match(a, b)`                                     | `validkit.validation.must_match`            |
| `validate_non_control_character(value)`                         | `validkit.validation.non_control_character` |
| `validate_required(value)`                                      | `validkit.validation.required`              |

Notes on their behaviour:

- `None` passes `validate_email`, `validate_url`, `validate_length`,
  `validate_range`, `validate_contains`, `validate_does_not_contain` and
  `validate_regex`. `validate_required` is true for anything but `None`.
- `validate_email` follows the HTML form definition of an e-mail address:
  the local part may be at most 64 characters and the domain at most 255; the
  domain may be a host name, a bracketed IPv4 or IPv6 literal such as
  `[127.0.0.1]`, or an internationalised domain name. It raises `TypeError`
  for values that are not strings.
- `validate_ip`, `validate_ipv4` and `validate_ipv6` check the string form of
  any value, so objects with a suitable `__str__` can be checked.
- `validate_length` counts characters for strings and items for other sized
  values; `equal`, when given, takes precedence over `min` and `max`.
- `validate_range` works with any values that support `<` and `>`. Bounds
  left as `None` are not checked.
- `validate_contains` looks for a substring in a string and for a key in a
  mapping; other types raise `TypeError`.
- `validate_regex` accepts a pattern string or a compiled pattern and passes
  when the pattern matches anywhere in the value. `as_regex` returns the
  compiled pattern, compiling strings once.
- `validate_non_control_character` accepts a string or any iterable of
  characters and fails on characters of Unicode category Cc.

```python
from validkit.validation.email import validate_email
from validkit.validation.length import validate_length
from validkit.validation.range import validate_range

validate_email("someone@example.com")    # True
validate_length("日本", None, None, 2)   # True: counts characters
validate_range(5, 17, 19, None, None)    # False
```

## Validation errors

`validkit.errors` holds the error types:

- `ValidationError`: one failed check, with a `code`, an optional `message`
  and a dict of `params`. `add_param(name, value)` records a parameter and
  `with_message(message)` sets the message and returns the error.
- `ValidationErrors`: errors keyed by field name. Each entry is a
  `FieldErrors` (a list of `ValidationError`), a `StructErrors` (the errors of
  a nested object) or a `ListErrors` (the errors of the items of a
  collection, keyed by index). `add(field, error)` adds a field error,
  `field_errors()` returns only the direct field errors and `is_empty()` tells
  whether anything was recorded.

Both are exceptions, so they can be raised and caught.

```python
from validkit.errors import ValidationError, ValidationErrors

errors = ValidationErrors()
errors.add("foo", ValidationError("length").with_message("Please provide a valid foo!"))
print(errors)  # foo: Please provide a valid foo!
```

An error without a message prints as `Validation error: <code> [<params>]`.
Nested errors print with dotted paths and indices, for example
`bar.foo: ...` or `baz[0].foo: ...`, one field per line.

Outcomes of nested validation are combined with `merge_self`, and with the
static methods `merge`, `merge_all` and `has_error`; in these, `None` stands
for a successful outcome.

## Validating objects

`validkit.traits.Validatable` is a base class whose `validate()` returns
`None` on success and raises `ValidationErrors` on failure. By default it
validates every public attribute that is itself `Validatable`, or is a list,
tuple, set, deque or mapping of `Validatable` values, and nests their errors
under the attribute's name. Subclasses override `validate()` to add their
own field checks.

`validate_collection(items)`, `validate_mapping(mapping)` and
`validate_optional(value)` validate sequences, mapping values and optional
values of such objects.

## What it does not do

There is no declarative way to attach checks to fields: a class states its
checks by overriding `validate()` and calling the functions above. There is
no credit-card check.