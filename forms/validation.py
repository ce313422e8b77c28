"""
Field validation for the catalog forms.

A form is described by a list of ``FieldRule``. Each rule runs all of its
validators in order over the submitted value; a validator is a plain
function returning an ``Outcome`` with either the (possibly sanitized)
value or a violation message. A violation does not stop the chain, every
failing check of a field is reported. ``validate_form`` runs every rule
once and collects the sanitized values together with the ordered list of
violations, so the caller can both persist and re-render from the same
result.

The checks themselves are pydantic ``TypeAdapter`` instances; a
``ValidationError`` is mapped to the message of the rule.
"""

from datetime import date
from typing import Annotated, Any, Callable, List, Mapping, Optional

from pydantic import BaseModel, Field, StringConstraints, TypeAdapter, ValidationError

Trimmed = TypeAdapter(Annotated[str, StringConstraints(strip_whitespace=True)])
AlphanumericText = TypeAdapter(Annotated[str, StringConstraints(pattern=r"^[A-Za-z0-9]+$")])
IsoDate = TypeAdapter(date)
IdList = TypeAdapter(List[Annotated[str, StringConstraints(strip_whitespace=True)]])


class Outcome(BaseModel):
    value: Any = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class FieldError(BaseModel):
    field: str
    msg: str
    value: Any = None


class FormResult(BaseModel):
    values: dict = Field(default_factory=dict)
    errors: List[FieldError] = Field(default_factory=list)

    def is_empty(self) -> bool:
        return not self.errors


Validator = Callable[[Any], Outcome]


class FieldRule(BaseModel):
    """Validators for one field.

    With ``optional`` set, falsy input skips the chain and yields ``None``.
    """

    field: str
    validators: List[Validator] = Field(default_factory=list)
    optional: bool = False

    def apply(self, raw: Any) -> tuple[Any, List[str]]:
        if self.optional and not raw:
            return None, []
        value = raw
        errors = []
        for validator in self.validators:
            outcome = validator(value)
            if not outcome.ok:
                errors.append(outcome.error)
            value = outcome.value
        return value, errors


def validate_form(form: Mapping[str, Any], rules: List[FieldRule]) -> FormResult:
    result = FormResult()
    for rule in rules:
        value, errors = rule.apply(form.get(rule.field))
        result.values[rule.field] = value
        for error in errors:
            result.errors.append(FieldError(field=rule.field, msg=error, value=value))
    return result


def constrained(adapter: TypeAdapter, message: str, invalid_value: Any = ...) -> Validator:
    """Validator from a pydantic adapter.

    On failure the value passes through unchanged, unless ``invalid_value`` is given.
    """

    def check(value: Any) -> Outcome:
        try:
            return Outcome(value=adapter.validate_python(value))
        except ValidationError:
            return Outcome(value=value if invalid_value is ... else invalid_value, error=message)

    return check


def trim(value: Any) -> Outcome:
    return Outcome(value=Trimmed.validate_python(value or ""))


def min_length(length: int, message: str) -> Validator:
    return constrained(TypeAdapter(Annotated[str, StringConstraints(min_length=length)]), message)


def alphanumeric(message: str) -> Validator:
    return constrained(AlphanumericText, message)


def iso_date(message: str) -> Validator:
    """Accepts ISO 8601 dates, converts to ``date``."""
    return constrained(IsoDate, message, invalid_value=None)


def id_list(value: Any) -> Outcome:
    if value is None:
        return Outcome(value=[])
    if isinstance(value, str):
        value = [value]
    return Outcome(value=[item for item in IdList.validate_python(value) if item])


def blank_to_none(value: Any) -> Outcome:
    return Outcome(value=Trimmed.validate_python(value or "") or None)
