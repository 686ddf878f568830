"""
Tests for PlayTypeRegistry and the built-in play type rules.
"""

import pytest

from theater_engines.play_types import (
    COMEDY_RULE,
    TRAGEDY_RULE,
    PlayTypeRegistry,
    PlayTypeRule,
    comedy_amount,
    comedy_credit_bonus,
    default_registry,
    no_credit_bonus,
    tragedy_amount,
)
from theater_kernel.exceptions import (
    PlayTypeAlreadyRegisteredError,
    UnknownPlayTypeError,
)


def _flat(amount):
    return lambda audience, terms: amount


class TestDefaultRegistry:
    def test_contains_builtin_types(self):
        registry = default_registry()
        assert registry.list_play_types() == ["comedy", "tragedy"]
        assert registry.get("tragedy") is TRAGEDY_RULE
        assert registry.get("comedy") is COMEDY_RULE

    def test_each_call_returns_independent_registry(self):
        first = default_registry()
        second = default_registry()
        first.register(PlayTypeRule("musical", _flat(1)))
        assert "musical" in first
        assert "musical" not in second

    def test_builtin_rule_functions(self):
        assert TRAGEDY_RULE.price is tragedy_amount
        assert TRAGEDY_RULE.credit_bonus is no_credit_bonus
        assert COMEDY_RULE.price is comedy_amount
        assert COMEDY_RULE.credit_bonus is comedy_credit_bonus


class TestRegistration:
    def test_register_and_get(self):
        registry = PlayTypeRegistry()
        rule = PlayTypeRule("musical", _flat(100))
        registry.register(rule)
        assert registry.get("musical") is rule
        assert registry.has_rule("musical")
        assert len(registry) == 1

    def test_duplicate_rejected(self):
        registry = default_registry()
        with pytest.raises(PlayTypeAlreadyRegisteredError) as exc_info:
            registry.register(PlayTypeRule("tragedy", _flat(1)))
        assert exc_info.value.play_type == "tragedy"

    def test_replace_allowed_explicitly(self):
        registry = default_registry()
        rule = PlayTypeRule("tragedy", _flat(1))
        registry.register(rule, replace=True)
        assert registry.get("tragedy") is rule

    def test_unregister(self):
        registry = default_registry()
        registry.unregister("comedy")
        assert not registry.has_rule("comedy")
        registry.unregister("comedy")  # no-op when absent

    def test_get_unknown_raises(self):
        with pytest.raises(UnknownPlayTypeError, match="opera"):
            PlayTypeRegistry().get("opera")

    def test_find_unknown_returns_none(self):
        assert default_registry().find("opera") is None

    def test_default_credit_bonus_is_zero(self):
        rule = PlayTypeRule("musical", _flat(1))
        assert rule.credit_bonus(100, None) == 0
