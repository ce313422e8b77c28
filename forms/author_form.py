from typing import Mapping, Optional, Tuple

from forms.validation import FieldRule, FormResult, alphanumeric, iso_date, min_length, trim, validate_form
from models.author import AuthorCandidate

AUTHOR_RULES = [
    FieldRule(
        field="first_name",
        validators=[
            trim,
            min_length(1, "First name must be specified"),
            alphanumeric("First name has non-alphanumeric characters."),
        ],
    ),
    FieldRule(
        field="family_name",
        validators=[
            trim,
            min_length(1, "Family name must be specified"),
            alphanumeric("Family name has non-alphanumeric characters."),
        ],
    ),
    FieldRule(field="date_of_birth", validators=[iso_date("Invalid date of birth")], optional=True),
    FieldRule(field="date_of_death", validators=[iso_date("Invalid date of death")], optional=True),
]


def validate_author_form(form: Mapping, author_id: Optional[str] = None) -> Tuple[AuthorCandidate, FormResult]:
    result = validate_form(form, AUTHOR_RULES)
    return AuthorCandidate(id=author_id, **result.values), result
