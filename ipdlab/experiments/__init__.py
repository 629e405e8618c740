"""Tournament experiments."""

from .tournament import (
    TieBreaker,
    SingleRoundRobin,
    DoubleRoundRobin,
    SwissFormat,
    TournamentFormat,
    DEFAULT_TOURNAMENT_FORMAT,
    HeadToHeadSummary,
    TournamentResult,
    SwissRoundMatch,
    SwissBye,
    SwissLeaderboardEntry,
    SwissRoundSummary,
    TournamentOutcome,
    Tournament,
    simulate_tournament,
    format_to_dict,
    outcome_to_dict,
)

__all__ = [
    # Formats
    "TieBreaker",
    "SingleRoundRobin",
    "DoubleRoundRobin",
    "SwissFormat",
    "TournamentFormat",
    "DEFAULT_TOURNAMENT_FORMAT",
    # Results
    "HeadToHeadSummary",
    "TournamentResult",
    "SwissRoundMatch",
    "SwissBye",
    "SwissLeaderboardEntry",
    "SwissRoundSummary",
    "TournamentOutcome",
    # Runners
    "Tournament",
    "simulate_tournament",
    "format_to_dict",
    "outcome_to_dict",
]
