"""Exceptions raised by the pricing core and its collaborators."""


class PricingError(Exception):
    """Base class for pricing core errors."""
    pass


class TotalsConsistencyError(PricingError):
    """Raised when aggregated document totals do not reconcile."""
    pass


class CollectionUnavailableError(PricingError):
    """Raised by collection loaders when the sibling collection cannot be fetched."""
    pass
