"""Declarative form validation.

A form is an ordered list of (field, predicate, message) constraints. Every
constraint is evaluated on submit; the first failure per field is reported.
"""

import re
from typing import Any, Callable, Iterable, Mapping, NamedTuple

from ...common.dates import parse_instant
from ...common.errors import ValidationError

EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class Constraint(NamedTuple):
    field: str
    predicate: Callable[[Any], bool]
    message: str


def validate(data: Mapping[str, Any], constraints: Iterable[Constraint]) -> dict[str, str]:
    """Return field -> message for every failing field (empty dict if valid)."""
    errors: dict[str, str] = {}
    for field, predicate, message in constraints:
        if field in errors:
            continue
        try:
            ok = predicate(data.get(field))
        except (TypeError, ValueError):
            ok = False
        if not ok:
            errors[field] = message
    return errors


def check(data: Mapping[str, Any], constraints: Iterable[Constraint]) -> None:
    """Raise ValidationError with all field messages if any constraint fails."""
    errors = validate(data, constraints)
    if errors:
        raise ValidationError(errors)


# --- Predicates ---


def required(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    return True


def is_email(value: Any) -> bool:
    return isinstance(value, str) and bool(EMAIL_RE.match(value.strip()))


def min_length(n: int) -> Callable[[Any], bool]:
    return lambda value: isinstance(value, str) and len(value) >= n


def number_at_least(minimum: float) -> Callable[[Any], bool]:
    def _check(value: Any) -> bool:
        if isinstance(value, bool) or value is None or value == "":
            return False
        return float(value) >= minimum
    return _check


def one_of(choices: Iterable[str]) -> Callable[[Any], bool]:
    allowed = {str(c).upper() for c in choices}
    return lambda value: value is not None and str(value).upper() in allowed


def is_date(value: Any) -> bool:
    parse_instant(value)
    return True
