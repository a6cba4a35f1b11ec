"""Tests for cupsmodels/compare.py - natural-order model name comparison."""

from __future__ import annotations

import pytest
from cupsmodels.compare import model_compare, model_sort_key, sort_models

PAIRS = [
    ("item9", "item10"),
    ("abc", "abd"),
    ("ab", "abc"),
    ("1", "a"),
    ("HP-2", "HP-20"),
    ("LaserJet 4", "LaserJet 4000"),
    ("Model-2x", "Model-10"),
    ("a1b", "a1c"),
    ("07", "007"),
    ("A", "a"),
    ("abc1", "abcd"),
]


class TestModelCompare:
    """Tests for model_compare function."""

    @pytest.mark.parametrize("s", ["", "a", "123", "HP LaserJet 4000", "x1y22z333", "٣"])
    def test_identical_strings_are_equal(self, s):
        """A string always compares equal to itself."""
        assert model_compare(s, s) == 0

    @pytest.mark.parametrize("a,b", PAIRS)
    def test_antisymmetric(self, a, b):
        """Swapping the arguments flips the sign."""
        assert model_compare(a, b) == -model_compare(b, a)

    @pytest.mark.parametrize("a,b", PAIRS)
    def test_result_is_normalised(self, a, b):
        """Results are exactly -1, 0 or 1."""
        assert model_compare(a, b) in (-1, 0, 1)

    def test_digit_runs_compare_numerically(self):
        """item9 sorts before item10."""
        assert model_compare("item9", "item10") == -1
        assert model_compare("item10", "item9") == 1

    def test_non_digit_runs_compare_by_character(self):
        """abc sorts before abd."""
        assert model_compare("abc", "abd") == -1

    def test_comparison_is_case_sensitive(self):
        """Uppercase letters sort before lowercase ones."""
        assert model_compare("A", "a") == -1
        assert model_compare("hp", "HP") == 1

    def test_shorter_other_segment_sorts_first(self):
        """ab sorts before abc when the shared prefix is equal."""
        assert model_compare("ab", "abc") == -1

    def test_shorter_other_segment_before_following_digits(self):
        """The non-digit run 'abc' is shorter than 'abcd'."""
        assert model_compare("abc1", "abcd") == -1

    def test_digits_sort_before_non_digits(self):
        """A digit run sorts before a non-digit run at the same position."""
        assert model_compare("1", "a") == -1
        assert model_compare("a", "1") == 1
        assert model_compare("Model-2x", "Model-x") == -1

    def test_equal_value_longer_digit_run_sorts_last(self):
        """Leading zeros do not change value, then the longer run sorts last."""
        assert model_compare("007", "07") == 1
        assert model_compare("07", "007") == -1
        assert model_compare("7", "7") == 0

    def test_equal_segments_continue_to_next(self):
        """Equal segments move the comparison on to the next pair."""
        assert model_compare("a1b", "a1c") == -1
        assert model_compare("x10y2", "x10y10") == -1

    def test_exhausted_input_compares_equal(self):
        """Comparison stops as soon as either string is used up."""
        assert model_compare("100", "100a") == 0
        assert model_compare("100a", "100") == 0
        assert model_compare("HP", "HP LaserJet") == -1  # "HP" is a shorter run, not exhausted

    def test_empty_strings(self):
        """Empty input compares equal to anything."""
        assert model_compare("", "") == 0
        assert model_compare("", "a") == 0
        assert model_compare("a", "") == 0

    def test_very_long_digit_runs(self):
        """Digit runs far beyond machine integers still compare by value."""
        small = "x" + "9" * 5000
        large = "x1" + "0" * 5000
        assert model_compare(small, large) == -1
        assert model_compare(large, small) == 1
        assert model_compare("x" + "0" * 6000 + "5", "x5") == 1

    def test_only_ascii_digits_are_numeric(self):
        """Other Unicode digits are treated as ordinary characters."""
        assert model_compare("٣", "1") == 1
        assert model_compare("1", "٣") == -1


class TestSortModels:
    """Tests for sort_models and model_sort_key."""

    def test_sort_hp_models(self):
        """Model numbers sort by value."""
        result = sort_models({"HP-200", "HP-20", "HP-2", "HP-1000"})
        assert result == ["HP-2", "HP-20", "HP-200", "HP-1000"]

    def test_sort_key_with_sorted(self):
        """model_sort_key plugs into the built-in sort."""
        names = ["LaserJet-2200", "LaserJet-100", "DeskJet-9"]
        assert sorted(names, key=model_sort_key) == ["DeskJet-9", "LaserJet-100", "LaserJet-2200"]

    def test_reverse(self):
        """reverse=True sorts in descending order."""
        result = sort_models(["Model-2", "Model-10", "Model-1"], reverse=True)
        assert result == ["Model-10", "Model-2", "Model-1"]

    def test_key_extracts_name(self):
        """key selects the model name from each item."""
        items = [("b", "Model-10"), ("a", "Model-2")]
        result = sort_models(items, key=lambda item: item[1])
        assert result == [("a", "Model-2"), ("b", "Model-10")]

    def test_returns_new_list(self):
        """The input is left untouched."""
        names = ["Model-10", "Model-2"]
        result = sort_models(names)
        assert names == ["Model-10", "Model-2"]
        assert result == ["Model-2", "Model-10"]

    def test_empty_input(self):
        """Empty input sorts to an empty list."""
        assert sort_models([]) == []
