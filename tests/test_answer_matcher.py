import pytest

from apps.domains.results.services.answer_matcher import matches


class TestMatches:
    def test_exact_match(self):
        assert matches("Paris", "Paris") is True

    def test_ignores_case_and_surrounding_whitespace(self):
        assert matches("  pARIS \n", "Paris ") is True

    def test_inner_whitespace_is_significant(self):
        assert matches("New  York", "New York") is False

    def test_different_answer(self):
        assert matches("41", "42") is False

    def test_absent_answer_never_matches(self):
        assert matches(None, "Paris") is False
        assert matches(None, "") is False

    def test_empty_answer_matches_only_empty_key(self):
        assert matches("", "Paris") is False
        assert matches("   ", "") is True

    @pytest.mark.parametrize(
        "answer,key",
        [("B) Rome", "b) rome"), ("ÇAY", "çay"), ("42", " 42")],
    )
    def test_multiple_choice_compares_key_text_only(self, answer, key):
        assert matches(answer, key) is True
