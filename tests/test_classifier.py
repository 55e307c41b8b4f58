"""Tests for entry_requirements.classifier - the facts-to-color decision table."""

import itertools

import pytest

from entry_requirements.categories import Color
from entry_requirements.classifier import classify, classify_facts
from entry_requirements.models import ExtractedFacts
from entry_requirements.tristate import TriState

T = TriState.TRUE
F = TriState.FALSE
U = TriState.UNKNOWN

# (visa, e-authorization, vaccines) -> color, all 27 combinations
DECISION_TABLE = {
    (T, T, T): Color.PURPLE,
    (T, T, F): Color.RED,
    (T, T, U): Color.RED,
    (T, F, T): Color.PURPLE,
    (T, F, F): Color.RED,
    (T, F, U): Color.RED,
    (T, U, T): Color.PURPLE,
    (T, U, F): Color.RED,
    (T, U, U): Color.RED,
    (F, T, T): Color.YELLOW,
    (F, T, F): Color.BLUE,
    (F, T, U): Color.BLUE,
    (F, F, T): None,
    (F, F, F): Color.GREEN,
    (F, F, U): Color.GREEN,
    (F, U, T): None,
    (F, U, F): Color.GREEN,
    (F, U, U): Color.GREEN,
    (U, T, T): Color.YELLOW,
    (U, T, F): Color.BLUE,
    (U, T, U): Color.BLUE,
    (U, F, T): None,
    (U, F, F): None,
    (U, F, U): None,
    (U, U, T): None,
    (U, U, F): Color.GREEN,
    (U, U, U): None,
}


class TestDecisionTable:
    """Every tri-state combination maps to a defined label."""

    def test_table_covers_all_combinations(self):
        assert set(DECISION_TABLE) == set(itertools.product(TriState, repeat=3))

    @pytest.mark.parametrize("facts,expected", sorted(DECISION_TABLE.items(), key=str))
    def test_combination(self, facts, expected):
        assert classify(*facts) == expected

    @pytest.mark.parametrize("facts", list(itertools.product(TriState, repeat=3)))
    def test_result_is_color_or_none(self, facts):
        result = classify(*facts)
        assert result is None or isinstance(result, Color)


class TestScenarios:
    def test_visa_and_vaccines_is_purple(self):
        assert classify(T, U, T) == Color.PURPLE

    def test_eauth_without_vaccines_is_blue(self):
        assert classify(F, T, F) == Color.BLUE

    def test_eauth_with_vaccines_is_yellow(self):
        assert classify(F, T, T) == Color.YELLOW

    def test_only_clean_health_is_green(self):
        assert classify(U, U, F) == Color.GREEN

    def test_nothing_known_is_unclassified(self):
        assert classify(U, U, U) is None


class TestPriorityOrder:
    def test_visa_rule_beats_eauth_rule(self):
        """Visa + e-authorization without vaccines stays red, never blue."""
        assert classify(T, T, F) == Color.RED

    def test_visa_free_vaccines_without_eauth_falls_through(self):
        assert classify(F, F, T) is None
        assert classify(F, U, T) is None

    def test_eauth_decides_when_visa_unknown(self):
        assert classify(U, T, T) == Color.YELLOW

    def test_known_no_eauth_blocks_health_only_green(self):
        assert classify(U, F, F) is None


class TestDeterminism:
    @pytest.mark.parametrize("facts", list(itertools.product(TriState, repeat=3)))
    def test_repeated_calls_agree(self, facts):
        assert classify(*facts) == classify(*facts)

    def test_classify_facts_ignores_visa_free_days(self):
        with_days = ExtractedFacts(F, 90, U, F)
        without_days = ExtractedFacts(F, None, U, F)
        assert classify_facts(with_days) == classify_facts(without_days) == Color.GREEN
