import random

from ioequiz.hints import make_hint

from conftest import mc


class TestHints:
    def test_multiple_choice_eliminates_a_wrong_option(self):
        q = mc(1, "Paris", ["Paris", "London", "Rome"])
        hint = make_hint(q, random.Random(0))
        assert "Paris" not in hint
        assert "London" in hint or "Rome" in hint

    def test_multiple_choice_without_wrong_options(self):
        assert make_hint(mc(1, "Paris", ["Paris", "paris."])) == ""

    def test_fill_in_blank_first_letter(self, bank):
        assert make_hint(bank[1]) == 'First letter: "A..."'

    def test_rearrange_first_word(self, bank):
        assert make_hint(bank[2]) == 'First word: "I"'
