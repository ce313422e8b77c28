import unittest
from datetime import date

from forms.author_form import validate_author_form
from forms.book_form import validate_book_form
from forms.genre_form import validate_genre_form
from forms.validation import FieldRule, alphanumeric, min_length, trim, validate_form


class TestValidateForm(unittest.TestCase):
    def test_every_failing_check_is_reported(self):
        result = validate_form(
            {"name": "  "},
            [FieldRule(field="name", validators=[trim, min_length(1, "empty"), alphanumeric("not alphanumeric")])],
        )

        self.assertEqual([error.msg for error in result.errors], ["empty", "not alphanumeric"])
        self.assertEqual(result.values["name"], "")

    def test_optional_field_skips_falsy_values(self):
        result = validate_form({"when": ""}, [FieldRule(field="when", validators=[min_length(5, "short")], optional=True)])

        self.assertTrue(result.is_empty())
        self.assertIsNone(result.values["when"])


class TestAuthorForm(unittest.TestCase):
    def test_valid_author_is_trimmed_and_dates_parsed(self):
        author, result = validate_author_form(
            {"first_name": "  Jane ", "family_name": "Doe", "date_of_birth": "1970-01-02", "date_of_death": ""}
        )

        self.assertTrue(result.is_empty())
        self.assertEqual(author.first_name, "Jane")
        self.assertEqual(author.date_of_birth, date(1970, 1, 2))
        self.assertIsNone(author.date_of_death)
        self.assertIsNone(author.id)

    def test_errors_are_reported_in_field_order(self):
        author, result = validate_author_form(
            {"first_name": "", "family_name": "Do-e", "date_of_birth": "not a date", "date_of_death": None}
        )

        self.assertEqual(
            [error.msg for error in result.errors],
            [
                "First name must be specified",
                "First name has non-alphanumeric characters.",
                "Family name has non-alphanumeric characters.",
                "Invalid date of birth",
            ],
        )
        self.assertEqual(author.family_name, "Do-e")
        self.assertIsNone(author.date_of_birth)

    def test_empty_name_reports_both_messages(self):
        _, result = validate_author_form({"first_name": "", "family_name": "Doe"})

        self.assertEqual(
            [error.msg for error in result.errors],
            ["First name must be specified", "First name has non-alphanumeric characters."],
        )

    def test_only_ascii_letters_and_digits_are_alphanumeric(self):
        _, result = validate_author_form({"first_name": "½²", "family_name": "Doé"})

        self.assertEqual(
            [error.msg for error in result.errors],
            ["First name has non-alphanumeric characters.", "Family name has non-alphanumeric characters."],
        )

    def test_candidate_keeps_given_id(self):
        author, _ = validate_author_form({"first_name": "A", "family_name": "B"}, author_id="a1")

        self.assertEqual(author.id, "a1")


class TestGenreForm(unittest.TestCase):
    def test_short_name(self):
        genre, result = validate_genre_form({"name": " ab "})

        self.assertEqual(genre.name, "ab")
        self.assertEqual(len(result.errors), 1)
        self.assertIn("at least 3 characters", result.errors[0].msg)

    def test_valid_name(self):
        genre, result = validate_genre_form({"name": "Poetry"}, genre_id="g1")

        self.assertTrue(result.is_empty())
        self.assertEqual((genre.id, genre.name), ("g1", "Poetry"))


class TestBookForm(unittest.TestCase):
    def test_blank_author_and_genres_are_dropped(self):
        book, result = validate_book_form(
            {"title": "T", "author": "", "summary": "S", "isbn": "1", "genre": ["g1", " ", ""]}
        )

        self.assertTrue(result.is_empty())
        self.assertIsNone(book.author)
        self.assertEqual(book.genre, ["g1"])

    def test_required_fields(self):
        _, result = validate_book_form({"title": " ", "summary": "", "isbn": ""})

        self.assertEqual(
            [error.field for error in result.errors],
            ["title", "summary", "isbn"],
        )


if __name__ == "__main__":
    unittest.main()
