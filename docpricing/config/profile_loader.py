"""Profile loader for configurable pricing behavior."""

import yaml
from pathlib import Path
from typing import Dict, Any
from dataclasses import dataclass, field

DEFAULT_VAT_RATE = 0.15
DEFAULT_PREFIXES = {"quotation": "QT", "invoice": "INV"}
DEFAULT_PAD_WIDTH = 3
DEFAULT_TOLERANCES = {"consistency": 1e-6, "payment": 0.01}


@dataclass
class ProfileConfig:
    """Configuration profile for pricing and numbering."""
    name: str
    description: str = ""
    vat_rate: float = DEFAULT_VAT_RATE
    tolerances: Dict[str, float] = field(default_factory=lambda: dict(DEFAULT_TOLERANCES))
    prefixes: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_PREFIXES))
    pad_width: int = DEFAULT_PAD_WIDTH

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ProfileConfig':
        """Create ProfileConfig from dictionary.

        Missing tolerances and prefixes are filled from the defaults so a
        profile only needs to list what it changes.
        """
        numbering = data.get('numbering', {}) or {}
        tolerances = dict(DEFAULT_TOLERANCES)
        tolerances.update(data.get('tolerances', {}) or {})
        prefixes = dict(DEFAULT_PREFIXES)
        prefixes.update(numbering.get('prefixes', {}) or {})
        return cls(
            name=data.get('name', 'default'),
            description=data.get('description', ''),
            vat_rate=float(data.get('vat_rate', DEFAULT_VAT_RATE)),
            tolerances=tolerances,
            prefixes=prefixes,
            pad_width=int(numbering.get('pad_width', DEFAULT_PAD_WIDTH))
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary (same shape as the YAML file)."""
        return {
            'name': self.name,
            'description': self.description,
            'vat_rate': self.vat_rate,
            'tolerances': self.tolerances,
            'numbering': {
                'prefixes': self.prefixes,
                'pad_width': self.pad_width,
            }
        }


def get_profiles_dir() -> Path:
    """Get directory containing profile YAML files.

    Returns:
        Path to profiles directory
    """
    # docpricing/config/profile_loader.py -> docpricing/config -> docpricing -> root
    current_file = Path(__file__).resolve()
    project_root = current_file.parent.parent.parent
    return project_root / "configs" / "profiles"


def load_profile(profile_name: str = "default") -> ProfileConfig:
    """Load a configuration profile.

    Args:
        profile_name: Name of profile to load (without .yaml extension)

    Returns:
        ProfileConfig object

    Raises:
        FileNotFoundError: If profile file doesn't exist
        ValueError: If profile file is invalid
    """
    profiles_dir = get_profiles_dir()
    profile_path = profiles_dir / f"{profile_name}.yaml"

    if not profile_path.exists():
        raise FileNotFoundError(f"Profile not found: {profile_name} (expected at {profile_path})")

    try:
        with open(profile_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in profile {profile_name}: {e}") from e

    if not data:
        raise ValueError(f"Profile file is empty: {profile_path}")
    if not isinstance(data, dict):
        raise ValueError(f"Profile {profile_name} must be a mapping, got {type(data).__name__}")

    try:
        return ProfileConfig.from_dict(data)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Error loading profile {profile_name}: {e}") from e


def list_available_profiles() -> list[str]:
    """List all available profile names.

    Returns:
        List of profile names (without .yaml extension)
    """
    profiles_dir = get_profiles_dir()

    if not profiles_dir.exists():
        return ["default"]

    profiles = [profile_file.stem for profile_file in profiles_dir.glob("*.yaml")]
    return sorted(profiles) if profiles else ["default"]


def get_default_profile() -> ProfileConfig:
    """Get default profile (always available).

    Returns:
        Default ProfileConfig
    """
    try:
        return load_profile("default")
    except FileNotFoundError:
        return ProfileConfig(
            name="default",
            description="Default configuration"
        )
