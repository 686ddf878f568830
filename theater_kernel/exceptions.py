"""
Typed Exception Hierarchy for Theater Billing.

===============================================================================
WHY TYPED EXCEPTIONS
===============================================================================

A billing statement is either complete or it is not produced at all. Callers
must be able to tell a bad catalog reference from an unpriced play type
without parsing message strings, so:

  1. Every error has a TYPED exception class (catch by type, not message)
  2. Every exception has a CODE attribute (machine-readable, API-safe)
  3. Exceptions carry structured DATA (not just a message string)

Example:
    try:
        result = build_statement(invoice, catalog)
    except UnknownPlayIDError as e:
        report_missing_play(e.play_id)
    except UnknownPlayTypeError as e:
        report_unpriced_type(e.play_type)

===============================================================================
EXCEPTION HIERARCHY
===============================================================================

    TheaterBillingError (base)
    |
    +-- CatalogError
    |   +-- UnknownPlayIDError
    |
    +-- PricingError
    |   +-- UnknownPlayTypeError
    |
    +-- PerformanceError
    |   +-- InvalidAudienceError
    |
    +-- RegistryError
    |   +-- PlayTypeAlreadyRegisteredError
    |
    +-- ConfigurationError

===============================================================================
ERROR CODES - QUICK REFERENCE
===============================================================================

Category        | Code                          | When Raised
----------------|-------------------------------|---------------------------------------
Catalog         | UNKNOWN_PLAY_ID               | Performance references a missing play
Pricing         | UNKNOWN_PLAY_TYPE             | No pricing rule for the play's type
Performance     | INVALID_AUDIENCE              | Audience is negative or not an integer
Registry        | PLAY_TYPE_ALREADY_REGISTERED  | Second rule registered for one type tag
Configuration   | CONFIGURATION_ERROR           | Billing terms missing or out of range
"""


class TheaterBillingError(Exception):
    """
    Base exception for all theater billing errors.

    All subclasses must have a `code` class attribute for machine-readable
    error identification.
    """

    code: str = "THEATER_BILLING_ERROR"


# Catalog-related exceptions


class CatalogError(TheaterBillingError):
    """Base exception for catalog lookup errors."""

    code: str = "CATALOG_ERROR"


class UnknownPlayIDError(CatalogError):
    """A performance references a play id that is not in the catalog."""

    code: str = "UNKNOWN_PLAY_ID"

    def __init__(self, play_id: str):
        self.play_id = play_id
        super().__init__(f"Unknown play id: {play_id}")


# Pricing-related exceptions


class PricingError(TheaterBillingError):
    """Base exception for pricing errors."""

    code: str = "PRICING_ERROR"


class UnknownPlayTypeError(PricingError):
    """No pricing rule is registered for the play type."""

    code: str = "UNKNOWN_PLAY_TYPE"

    def __init__(self, play_type: str):
        self.play_type = play_type
        super().__init__(f"unknown type: {play_type}")


# Performance-related exceptions


class PerformanceError(TheaterBillingError):
    """Base exception for invalid performance data."""

    code: str = "PERFORMANCE_ERROR"


class InvalidAudienceError(PerformanceError):
    """Audience must be a non-negative integer."""

    code: str = "INVALID_AUDIENCE"

    def __init__(self, play_id: str, audience: object):
        self.play_id = play_id
        self.audience = audience
        super().__init__(
            f"Invalid audience {audience!r} for play {play_id}: "
            f"must be a non-negative integer"
        )


# Registry-related exceptions


class RegistryError(TheaterBillingError):
    """Base exception for play type registry errors."""

    code: str = "REGISTRY_ERROR"


class PlayTypeAlreadyRegisteredError(RegistryError):
    """A rule for this play type tag is already registered."""

    code: str = "PLAY_TYPE_ALREADY_REGISTERED"

    def __init__(self, play_type: str):
        self.play_type = play_type
        super().__init__(f"Play type already registered: {play_type}")


# Configuration exceptions


class ConfigurationError(TheaterBillingError):
    """Billing terms are missing, malformed or out of range."""

    code: str = "CONFIGURATION_ERROR"

    def __init__(self, message: str, field: str | None = None):
        self.field = field
        super().__init__(message)
