"""Payoff preset registry.

Every preset is a PayoffPreset built through create_payoff_preset so the
tournament engine can be pointed at alternative games by id.
"""

from typing import Dict, List

from .matrix_factory import PayoffPreset, create_payoff_preset, classify_matrix
from .prisoners_dilemma import PRESET as PRISONERS_DILEMMA
from .stag_hunt import PRESET as STAG_HUNT
from .chicken import PRESET as CHICKEN

PAYOFF_PRESETS: Dict[str, PayoffPreset] = {
    "prisoners_dilemma": PRISONERS_DILEMMA,
    "stag_hunt": STAG_HUNT,
    "chicken": CHICKEN,
}

DEFAULT_PAYOFF_PRESET_ID = "prisoners_dilemma"


def get_payoff_preset(preset_id: str) -> PayoffPreset:
    """Retrieve a payoff preset by ID.

    Args:
        preset_id: Preset identifier

    Returns:
        The matching PayoffPreset

    Raises:
        ValueError: If no preset has this ID.
    """
    if preset_id not in PAYOFF_PRESETS:
        raise ValueError(
            f"Unknown payoff preset: {preset_id}. Available: {list(PAYOFF_PRESETS.keys())}"
        )
    return PAYOFF_PRESETS[preset_id]


def list_payoff_presets() -> List[PayoffPreset]:
    """Return all presets in registration order."""
    return list(PAYOFF_PRESETS.values())


__all__ = [
    "PayoffPreset",
    "PAYOFF_PRESETS",
    "DEFAULT_PAYOFF_PRESET_ID",
    "get_payoff_preset",
    "list_payoff_presets",
    "create_payoff_preset",
    "classify_matrix",
]
