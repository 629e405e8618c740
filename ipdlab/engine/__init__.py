"""Match engine for ipdlab."""

from .match import payoff_for, apply_noise, play_match

__all__ = [
    "payoff_for",
    "apply_noise",
    "play_match",
]
