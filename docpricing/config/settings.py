"""Central settings for the pricing core.

Values come from the active profile; a few can be overridden through
environment variables for deployments that do not ship their own profile.
"""

import logging
import math
import os

from .profile_manager import get_profile

logger = logging.getLogger(__name__)

VAT_RATE_ENV_VAR = "DOCPRICING_VAT_RATE"


def get_vat_rate() -> float:
    """Get the default VAT rate.

    Returns:
        DOCPRICING_VAT_RATE when set to a valid non-negative number,
        otherwise the active profile's vat_rate (0.15 by default)
    """
    env_value = os.getenv(VAT_RATE_ENV_VAR)
    if env_value is not None:
        try:
            rate = float(env_value)
        except ValueError:
            rate = -1.0
        if math.isfinite(rate) and rate >= 0:
            return rate
        logger.warning(f"Invalid {VAT_RATE_ENV_VAR}: {env_value!r}, using profile value")

    return get_profile().vat_rate


def get_numbering_prefix(kind: str = "invoice") -> str:
    """Get the display-number prefix for a document kind.

    Args:
        kind: Document kind, e.g. "quotation" or "invoice"

    Returns:
        Configured prefix; unknown kinds use the upper-cased kind itself
    """
    prefixes = get_profile().prefixes
    prefix = prefixes.get(kind)
    if not prefix:
        logger.warning(f"No numbering prefix configured for '{kind}'")
        return kind.upper()
    return prefix


def get_pad_width() -> int:
    """Get the zero-padding width of the display-number sequence."""
    width = get_profile().pad_width
    if width < 1:
        logger.warning(f"Invalid pad_width {width}, using 3")
        return 3
    return width


def get_consistency_tolerance() -> float:
    """Tolerance used when cross-checking aggregated totals."""
    return float(get_profile().tolerances.get("consistency", 1e-6))


def get_payment_tolerance() -> float:
    """Amount below which an outstanding balance counts as settled."""
    return float(get_profile().tolerances.get("payment", 0.01))
