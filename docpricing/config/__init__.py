"""Configuration package."""

from .profile_loader import ProfileConfig, get_default_profile, list_available_profiles, load_profile
from .profile_manager import get_profile, reset_profile, set_profile
from .settings import (
    get_consistency_tolerance,
    get_numbering_prefix,
    get_pad_width,
    get_payment_tolerance,
    get_vat_rate,
)

__all__ = [
    'ProfileConfig',
    'load_profile',
    'list_available_profiles',
    'get_default_profile',
    'get_profile',
    'set_profile',
    'reset_profile',
    'get_vat_rate',
    'get_numbering_prefix',
    'get_pad_width',
    'get_consistency_tolerance',
    'get_payment_tolerance',
]
