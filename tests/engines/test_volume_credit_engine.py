"""
Tests for the Volume Credit Engine.
"""

import pytest

from theater_engines.play_types import PlayTypeRule
from theater_engines.volume_credits import VolumeCreditEngine, base_volume_credits
from theater_kernel.domain.terms import BillingTerms, VolumeCreditTerms
from theater_kernel.domain.values import Performance, Play

HAMLET = Play("Hamlet", "tragedy")
AS_LIKE = Play("As You Like It", "comedy")
HENRY_V = Play("Henry V", "history")


@pytest.fixture
def engine(standard_terms, registry):
    return VolumeCreditEngine(standard_terms, registry)


class TestBaseCredits:
    """Every type earns max(audience - 30, 0)."""

    def test_tragedy_scenario(self, engine):
        assert engine.compute_volume_credits(Performance("hamlet", 40), HAMLET) == 10

    @pytest.mark.parametrize("audience", [0, 10, 30])
    def test_no_credit_at_or_below_threshold(self, engine, audience):
        assert engine.compute_volume_credits(Performance("hamlet", audience), HAMLET) == 0

    def test_base_helper(self, standard_terms):
        assert base_volume_credits(55, standard_terms) == 25
        assert base_volume_credits(3, standard_terms) == 0


class TestComedyBonus:
    """Comedy adds audience // 5."""

    def test_comedy_scenario(self, engine):
        """25 seats: base 0, bonus 25 // 5 = 5."""
        assert engine.compute_volume_credits(Performance("as-like", 25), AS_LIKE) == 5

    def test_bonus_truncates(self, engine):
        assert engine.compute_volume_credits(Performance("as-like", 9), AS_LIKE) == 1
        assert engine.compute_volume_credits(Performance("as-like", 4), AS_LIKE) == 0

    def test_base_and_bonus_combine(self, engine):
        """35 seats: 5 base + 7 bonus."""
        assert engine.compute_volume_credits(Performance("as-like", 35), AS_LIKE) == 12

    def test_configured_divisor_used(self, registry):
        terms = BillingTerms(volume_credits=VolumeCreditTerms(base_threshold=30, comedy_bonus_divisor=10))
        engine = VolumeCreditEngine(terms, registry)
        assert engine.compute_volume_credits(Performance("as-like", 25), AS_LIKE) == 2


class TestUnknownTypeCredits:
    """Unlike pricing, unknown types are not an error for credits."""

    def test_unknown_type_earns_base_only(self, engine):
        assert engine.compute_volume_credits(Performance("henry-v", 40), HENRY_V) == 10

    def test_unknown_type_below_threshold_earns_nothing(self, engine):
        assert engine.compute_volume_credits(Performance("henry-v", 25), HENRY_V) == 0

    def test_custom_rule_bonus(self, standard_terms, registry):
        registry.register(PlayTypeRule(
            play_type="history",
            price=lambda audience, terms: 0,
            credit_bonus=lambda audience, terms: 3,
        ))
        engine = VolumeCreditEngine(standard_terms, registry)
        assert engine.compute_volume_credits(Performance("henry-v", 40), HENRY_V) == 13
