"""Active pricing profile, selected explicitly or through DOCPRICING_PROFILE."""

import logging
import os
from typing import Optional

from .profile_loader import ProfileConfig, get_default_profile, load_profile

logger = logging.getLogger(__name__)

PROFILE_ENV_VAR = "DOCPRICING_PROFILE"

_current_profile: Optional[ProfileConfig] = None


def set_profile(profile_name: str = "default") -> ProfileConfig:
    """Load profile_name and make it the active profile.

    Raises:
        FileNotFoundError: If profile doesn't exist
        ValueError: If profile is invalid
    """
    global _current_profile
    _current_profile = load_profile(profile_name)
    logger.debug(f"Active pricing profile: {_current_profile.name}")
    return _current_profile


def get_profile() -> ProfileConfig:
    """Get the active profile.

    On first use the profile named by DOCPRICING_PROFILE is loaded; an
    unknown or broken profile falls back to the default one with a warning.
    """
    global _current_profile
    if _current_profile is not None:
        return _current_profile

    requested = os.getenv(PROFILE_ENV_VAR)
    if requested:
        try:
            return set_profile(requested)
        except (FileNotFoundError, ValueError) as e:
            logger.warning(f"Cannot use profile '{requested}' from {PROFILE_ENV_VAR}: {e}, using default")

    _current_profile = get_default_profile()
    return _current_profile


def reset_profile() -> None:
    """Forget the active profile; the next get_profile() reloads it."""
    global _current_profile
    _current_profile = None
