"""
Argument Validation

Fail-fast checks run by every service operation before it touches storage.

Each argument is described by a dict:

    {"name": "title", "value": title, "type": str, "not_empty": True}

Keys:
    name       Argument name used in the error message
    value      The value to check
    type       Expected Python type (or tuple of types)
    not_empty  Reject "" and whitespace-only strings, and empty dicts/lists
    optional   Accept None (otherwise None raises RequirementError)

A whitespace-only string counts as empty: a title of "  " fails not_empty
with ArgumentValueError, the same as "". Values are not stripped before
they are stored.

Usage:
======
    from photopin.shared.utils.validation import Validator

    validator = Validator()
    validator.check_arguments([
        {"name": "userId", "value": user_id, "type": str, "not_empty": True},
        {"name": "data", "value": data, "type": dict, "not_empty": True},
    ])
    validator.check_email(email)
"""

from typing import Any, Iterable

from email_validator import EmailNotValidError, validate_email

from photopin.shared.core.exceptions import (
    ArgumentTypeError,
    ArgumentValueError,
    FormatError,
    RequirementError,
)


def _type_name(expected: Any) -> str:
    if isinstance(expected, tuple):
        return " or ".join(t.__name__ for t in expected)
    return expected.__name__


class Validator:
    """Argument shape and email format checks."""

    def check_arguments(self, specs: Iterable[dict[str, Any]]) -> None:
        """
        Validate a list of argument specs, raising on the first violation.

        Raises:
            RequirementError: value is None and the argument is not optional
            ArgumentTypeError: value is not an instance of the expected type
            ArgumentValueError: value is empty or blank and not_empty is set
        """
        for spec in specs:
            name = spec["name"]
            value = spec.get("value")
            expected = spec.get("type")

            if value is None:
                if spec.get("optional"):
                    continue
                raise RequirementError(f"{name} is not optional", field=name)

            if expected is not None:
                allowed = expected if isinstance(expected, tuple) else (expected,)
                # bool is an int subclass
                wrong_bool = isinstance(value, bool) and bool not in allowed
                if wrong_bool or not isinstance(value, allowed):
                    raise ArgumentTypeError(
                        f"{name} {value!r} is not a {_type_name(expected)}", field=name
                    )

            if spec.get("not_empty"):
                if isinstance(value, str) and not value.strip():
                    raise ArgumentValueError(f"{name} is empty or blank", field=name)
                if isinstance(value, (dict, list)) and not value:
                    raise ArgumentValueError(f"{name} is empty", field=name)

    def check_email(self, value: str) -> None:
        """
        Check the syntax of an email address (no DNS lookup).

        Raises:
            FormatError: if the value is not a valid email
        """
        try:
            validate_email(value, check_deliverability=False)
        except EmailNotValidError as e:
            raise FormatError(f"{value} is not an e-mail", field="email") from e
