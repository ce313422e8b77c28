from typing import Mapping, Optional, Tuple

from forms.validation import FieldRule, FormResult, blank_to_none, id_list, min_length, trim, validate_form
from models.book import BookCandidate

BOOK_RULES = [
    FieldRule(field="title", validators=[trim, min_length(1, "Title must not be empty.")]),
    FieldRule(field="author", validators=[blank_to_none]),
    FieldRule(field="summary", validators=[trim, min_length(1, "Summary must not be empty.")]),
    FieldRule(field="isbn", validators=[trim, min_length(1, "ISBN must not be empty.")]),
    FieldRule(field="genre", validators=[id_list]),
]


def validate_book_form(form: Mapping, book_id: Optional[str] = None) -> Tuple[BookCandidate, FormResult]:
    result = validate_form(form, BOOK_RULES)
    return BookCandidate(id=book_id, **result.values), result
