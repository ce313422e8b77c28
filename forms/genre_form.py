from typing import Mapping, Optional, Tuple

from forms.validation import FieldRule, FormResult, min_length, trim, validate_form
from models.genre import GenreCandidate

GENRE_RULES = [
    FieldRule(
        field="name",
        validators=[trim, min_length(3, "Genre name must contain at least 3 characters")],
    ),
]


def validate_genre_form(form: Mapping, genre_id: Optional[str] = None) -> Tuple[GenreCandidate, FormResult]:
    result = validate_form(form, GENRE_RULES)
    return GenreCandidate(id=genre_id, **result.values), result
