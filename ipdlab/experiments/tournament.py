"""Tournament engine for strategy competitions.

Supports single round-robin, double round-robin, and Swiss-system
tournaments with head-to-head tracking, score dispersion, tie-breaks,
and Elo ratings folded from the matches in the order they were played.
"""

import logging
import math
from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Callable, ClassVar, Dict, List, Never, Optional, Sequence, Tuple, Union

import numpy as np

from ..analytics.elo import EloMatchResult, EloOutcome, process_elo_matches
from ..core.config import (
    DEFAULT_ERROR_RATE,
    DEFAULT_ROUNDS_PER_MATCH,
    SWISS_LEADERBOARD_SIZE,
)
from ..core.random import RandomSource, Seed, create_random_source
from ..core.types import DEFAULT_PAYOFF_MATRIX, MatchResult, PayoffMatrix, Strategy
from ..engine.match import play_match
from ..strategies import DEFAULT_STRATEGIES

logger = logging.getLogger(__name__)


class TieBreaker(str, Enum):
    """Secondary ranking criterion for Swiss tournaments."""
    BUCHHOLZ = "buchholz"
    SONNEBORN_BERGER = "sonneborn-berger"
    TOTAL_SCORE = "total-score"


@dataclass(frozen=True)
class SingleRoundRobin:
    """Every strategy meets every other strategy once."""
    kind: ClassVar[str] = "single-round-robin"


@dataclass(frozen=True)
class DoubleRoundRobin:
    """Every pairing is played twice, once with each side as player one."""
    kind: ClassVar[str] = "double-round-robin"


@dataclass(frozen=True)
class SwissFormat:
    """Swiss-system pairing.

    ``rounds`` defaults to ceil(log2(n)) + 1 and ``tie_breaker`` to total score.
    """
    kind: ClassVar[str] = "swiss"
    rounds: Optional[int] = None
    tie_breaker: Optional[TieBreaker] = None


TournamentFormat = Union[SingleRoundRobin, DoubleRoundRobin, SwissFormat]

DEFAULT_TOURNAMENT_FORMAT: TournamentFormat = SingleRoundRobin()


@dataclass
class HeadToHeadSummary:
    """Aggregate record of one strategy against a single opponent."""
    opponent: str
    matches: int
    wins: int
    draws: int
    losses: int
    player_score: float
    opponent_score: float
    average_score: float


@dataclass
class TournamentResult:
    """Per-strategy standing, finalized at the end of a tournament."""
    name: str
    total_score: float = 0.0
    average_score: float = 0.0
    matches_played: int = 0
    wins: int = 0
    std_deviation: float = 0.0
    head_to_head: List[HeadToHeadSummary] = field(default_factory=list)
    rating: Optional[float] = None


@dataclass(frozen=True)
class SwissRoundMatch:
    """A single pairing played in a Swiss round."""
    player: str
    opponent: str
    player_score: float
    opponent_score: float
    winner: str  # "player", "opponent", or "draw"


@dataclass(frozen=True)
class SwissBye:
    """A bye awarded in a Swiss round."""
    player: str
    awarded_score: float


@dataclass(frozen=True)
class SwissLeaderboardEntry:
    """Standing after a Swiss round; carries the active tie-break value."""
    name: str
    total_score: float
    wins: int
    matches_played: int
    buchholz: Optional[float] = None
    sonneborn_berger: Optional[float] = None


@dataclass(frozen=True)
class SwissRoundSummary:
    """Snapshot of one completed Swiss round."""
    round: int
    matches: List[SwissRoundMatch]
    byes: List[SwissBye]
    leaderboard: List[SwissLeaderboardEntry]


@dataclass
class TournamentOutcome:
    """Everything a tournament run produces."""
    format: TournamentFormat
    results: List[TournamentResult]
    ratings: Dict[str, float]
    swiss_rounds: Optional[List[SwissRoundSummary]] = None


@dataclass
class _HeadToHeadStats:
    matches: int = 0
    wins: int = 0
    draws: int = 0
    losses: int = 0
    player_score: float = 0.0
    opponent_score: float = 0.0


class _TournamentState:
    """Mutable aggregates for a single run, indexed like the strategy list."""

    def __init__(self, strategies: Sequence[Strategy]):
        self.strategies = list(strategies)
        self.results = [TournamentResult(name=s.name) for s in strategies]
        self.scores: List[List[float]] = [[] for _ in strategies]
        self.head_to_head: List[Dict[str, _HeadToHeadStats]] = [{} for _ in strategies]
        self.elo_matches: List[EloMatchResult] = []

    def _update_head_to_head(self, index: int, opponent: str, own: float, other: float) -> None:
        stats = self.head_to_head[index].setdefault(opponent, _HeadToHeadStats())
        stats.matches += 1
        stats.player_score += own
        stats.opponent_score += other
        if own > other:
            stats.wins += 1
        elif own == other:
            stats.draws += 1
        else:
            stats.losses += 1

    def record_match(self, first: int, second: int, match: MatchResult) -> str:
        """Fold a match into the aggregates.

        ``first`` must be the index of the match's player one.

        Returns:
            "player", "opponent", or "draw" from player one's perspective
        """
        for index, own, other, opponent in (
            (first, match.player1_score, match.player2_score, second),
            (second, match.player2_score, match.player1_score, first),
        ):
            result = self.results[index]
            result.total_score += own
            result.matches_played += 1
            self.scores[index].append(own)
            self._update_head_to_head(index, self.strategies[opponent].name, own, other)

        if match.player1_score > match.player2_score:
            self.results[first].wins += 1
            winner, outcome = "player", EloOutcome.WIN
        elif match.player2_score > match.player1_score:
            self.results[second].wins += 1
            winner, outcome = "opponent", EloOutcome.LOSS
        else:
            winner, outcome = "draw", EloOutcome.DRAW

        self.elo_matches.append(EloMatchResult(
            player=self.strategies[first].name,
            opponent=self.strategies[second].name,
            outcome=outcome,
        ))
        return winner

    def award_bye(self, index: int, score: float) -> None:
        result = self.results[index]
        result.total_score += score
        result.matches_played += 1
        result.wins += 1
        self.scores[index].append(score)

    def finalize(self, sort_key: Callable[[int], Any]) -> Tuple[List[TournamentResult], Dict[str, float]]:
        """Compute averages, dispersion, head-to-head summaries, order, and ratings."""
        for index, result in enumerate(self.results):
            if result.matches_played > 0:
                result.average_score = result.total_score / result.matches_played
                player_scores = self.scores[index]
                if len(player_scores) > 1:
                    result.std_deviation = float(np.std(player_scores))
                else:
                    result.std_deviation = 0.0

            summaries = [
                HeadToHeadSummary(
                    opponent=opponent,
                    matches=stats.matches,
                    wins=stats.wins,
                    draws=stats.draws,
                    losses=stats.losses,
                    player_score=stats.player_score,
                    opponent_score=stats.opponent_score,
                    average_score=stats.player_score / stats.matches,
                )
                for opponent, stats in self.head_to_head[index].items()
            ]
            result.head_to_head = sorted(summaries, key=lambda s: s.average_score, reverse=True)

        order = sorted(range(len(self.results)), key=sort_key)
        finalized = [self.results[index] for index in order]

        ratings = process_elo_matches(
            {result.name: result.rating for result in finalized},
            self.elo_matches,
        )
        for result in finalized:
            result.rating = ratings.get(result.name, result.rating)

        return finalized, ratings


def _match_source(seeded: Optional[RandomSource]) -> RandomSource:
    # One shared stream when seeded, otherwise a fresh unseeded stream per match
    return seeded if seeded is not None else create_random_source()


def _assert_unreachable(value: Never) -> Never:
    raise ValueError(f"Unsupported tournament format: {value!r}")


def _require_strategies(strategies: Sequence[Strategy]) -> None:
    if len(strategies) < 2:
        logger.debug("Refusing tournament with %d strategies", len(strategies))
        raise ValueError("Need at least 2 strategies")


class Tournament:
    """Runs tournaments between strategies."""

    def run_with_format(
        self,
        format: TournamentFormat,
        strategies: Sequence[Strategy],
        rounds_per_match: int = DEFAULT_ROUNDS_PER_MATCH,
        error_rate: float = DEFAULT_ERROR_RATE,
        payoff_matrix: PayoffMatrix = DEFAULT_PAYOFF_MATRIX,
        seed: Optional[Seed] = None,
    ) -> TournamentOutcome:
        """Run a tournament in the given format.

        Args:
            format: SingleRoundRobin, DoubleRoundRobin, or SwissFormat
            strategies: Participants (at least two)
            rounds_per_match: Rounds in every match
            error_rate: Per-move noise probability
            payoff_matrix: Reward table
            seed: Seed for one shared random stream; None for unseeded matches

        Returns:
            TournamentOutcome with ranked results and Elo ratings

        Raises:
            ValueError: If fewer than two strategies are given or the format is unknown
        """
        if isinstance(format, SingleRoundRobin):
            return self.run(strategies, rounds_per_match, error_rate, payoff_matrix, seed, False)
        if isinstance(format, DoubleRoundRobin):
            return self.run(strategies, rounds_per_match, error_rate, payoff_matrix, seed, True)
        if isinstance(format, SwissFormat):
            return self.run_swiss(format, strategies, rounds_per_match, error_rate, payoff_matrix, seed)
        return _assert_unreachable(format)

    def run(
        self,
        strategies: Sequence[Strategy],
        rounds_per_match: int = DEFAULT_ROUNDS_PER_MATCH,
        error_rate: float = DEFAULT_ERROR_RATE,
        payoff_matrix: PayoffMatrix = DEFAULT_PAYOFF_MATRIX,
        seed: Optional[Seed] = None,
        double_round_robin: bool = False,
    ) -> TournamentOutcome:
        """Run a single or double round-robin tournament.

        Pairs are played in (i, j) index order with i < j; in a double
        round-robin the j-vs-i rematch follows immediately.
        """
        _require_strategies(strategies)
        format = DoubleRoundRobin() if double_round_robin else SingleRoundRobin()
        logger.debug(
            "Starting %s with %d strategies (seeded=%s)",
            format.kind, len(strategies), seed is not None,
        )

        seeded = create_random_source(seed) if seed is not None else None
        state = _TournamentState(strategies)
        count = len(strategies)

        for i in range(count):
            for j in range(i + 1, count):
                match = play_match(
                    strategies[i], strategies[j], rounds_per_match,
                    error_rate, payoff_matrix, _match_source(seeded),
                )
                state.record_match(i, j, match)

                if double_round_robin:
                    rematch = play_match(
                        strategies[j], strategies[i], rounds_per_match,
                        error_rate, payoff_matrix, _match_source(seeded),
                    )
                    state.record_match(j, i, rematch)

        results, ratings = state.finalize(lambda index: -state.results[index].total_score)
        logger.debug("Finished %s; leader=%s", format.kind, results[0].name)
        return TournamentOutcome(format=format, results=results, ratings=ratings)

    def run_swiss(
        self,
        format: SwissFormat,
        strategies: Sequence[Strategy],
        rounds_per_match: int = DEFAULT_ROUNDS_PER_MATCH,
        error_rate: float = DEFAULT_ERROR_RATE,
        payoff_matrix: PayoffMatrix = DEFAULT_PAYOFF_MATRIX,
        seed: Optional[Seed] = None,
    ) -> TournamentOutcome:
        """Run a Swiss-system tournament.

        Each round ranks players by total score, the configured tie-break,
        wins, then name; gives a bye to the lowest-ranked player without one
        when the count is odd; and pairs greedily down the ranking, avoiding
        rematches while an unplayed opponent remains.
        """
        _require_strategies(strategies)
        count = len(strategies)
        rounds = format.rounds if format.rounds is not None else math.ceil(math.log2(count)) + 1
        total_rounds = max(1, rounds)
        tie_breaker = TieBreaker(format.tie_breaker or TieBreaker.TOTAL_SCORE)
        logger.debug(
            "Starting swiss with %d strategies, %d rounds, tie-breaker=%s (seeded=%s)",
            count, total_rounds, tie_breaker.value, seed is not None,
        )

        seeded = create_random_source(seed) if seed is not None else None
        state = _TournamentState(strategies)
        results = state.results

        pair_history: List[set] = [set() for _ in strategies]
        bye_history: set = set()
        # (opponent index, result from this player's side)
        opponent_records: List[List[Tuple[int, EloOutcome]]] = [[] for _ in strategies]
        round_summaries: List[SwissRoundSummary] = []

        def compute_tie_breakers() -> Tuple[List[float], List[float]]:
            buchholz = [0.0] * count
            sonneborn = [0.0] * count
            for index, records in enumerate(opponent_records):
                for opponent, outcome in records:
                    opponent_score = results[opponent].total_score
                    buchholz[index] += opponent_score
                    if outcome is EloOutcome.WIN:
                        sonneborn[index] += opponent_score
                    elif outcome is EloOutcome.DRAW:
                        sonneborn[index] += opponent_score / 2
            return buchholz, sonneborn

        def rank_key(buchholz: List[float], sonneborn: List[float]) -> Callable[[int], Any]:
            def key(index: int) -> Tuple[float, float, int, str, str]:
                if tie_breaker is TieBreaker.BUCHHOLZ:
                    tie_value = buchholz[index]
                elif tie_breaker is TieBreaker.SONNEBORN_BERGER:
                    tie_value = sonneborn[index]
                else:
                    tie_value = 0.0
                result = results[index]
                name = strategies[index].name
                return (-result.total_score, -tie_value, -result.wins, name.casefold(), name)
            return key

        for round_index in range(total_rounds):
            available = sorted(range(count), key=rank_key(*compute_tie_breakers()))

            bye_player = None
            if len(available) % 2 != 0:
                bye_player = next(
                    (index for index in reversed(available) if index not in bye_history),
                    available[-1],
                )
                available.remove(bye_player)
                bye_history.add(bye_player)

            pairings = []
            while available:
                player = available.pop(0)
                opponent_position = next(
                    (pos for pos, index in enumerate(available) if index not in pair_history[player]),
                    0,
                )
                pairings.append((player, available.pop(opponent_position)))

            round_matches = []
            for player, opponent in pairings:
                match = play_match(
                    strategies[player], strategies[opponent], rounds_per_match,
                    error_rate, payoff_matrix, _match_source(seeded),
                )
                winner = state.record_match(player, opponent, match)
                player_outcome = {
                    "player": EloOutcome.WIN,
                    "opponent": EloOutcome.LOSS,
                    "draw": EloOutcome.DRAW,
                }[winner]

                opponent_records[player].append((opponent, player_outcome))
                opponent_records[opponent].append((player, player_outcome.inverted))
                pair_history[player].add(opponent)
                pair_history[opponent].add(player)

                round_matches.append(SwissRoundMatch(
                    player=strategies[player].name,
                    opponent=strategies[opponent].name,
                    player_score=match.player1_score,
                    opponent_score=match.player2_score,
                    winner=winner,
                ))

            round_byes = []
            if bye_player is not None:
                bye_score = rounds_per_match * payoff_matrix.reward
                state.award_bye(bye_player, bye_score)
                round_byes.append(SwissBye(player=strategies[bye_player].name, awarded_score=bye_score))

            buchholz, sonneborn = compute_tie_breakers()
            leaderboard_order = sorted(range(count), key=rank_key(buchholz, sonneborn))
            leaderboard = [
                SwissLeaderboardEntry(
                    name=strategies[index].name,
                    total_score=results[index].total_score,
                    wins=results[index].wins,
                    matches_played=results[index].matches_played,
                    buchholz=buchholz[index] if tie_breaker is TieBreaker.BUCHHOLZ else None,
                    sonneborn_berger=(
                        sonneborn[index] if tie_breaker is TieBreaker.SONNEBORN_BERGER else None
                    ),
                )
                for index in leaderboard_order[:SWISS_LEADERBOARD_SIZE]
            ]

            round_summaries.append(SwissRoundSummary(
                round=round_index + 1,
                matches=round_matches,
                byes=round_byes,
                leaderboard=leaderboard,
            ))
            logger.debug(
                "Swiss round %d: %d pairings, byes=%s",
                round_index + 1, len(pairings), [bye.player for bye in round_byes],
            )

        final_results, ratings = state.finalize(rank_key(*compute_tie_breakers()))
        logger.debug("Finished swiss; leader=%s", final_results[0].name)
        return TournamentOutcome(
            format=format,
            results=final_results,
            ratings=ratings,
            swiss_rounds=round_summaries,
        )

    @staticmethod
    def format_results(results: Sequence[TournamentResult]) -> List[str]:
        """Render results as fixed-width text lines."""
        lines = [
            "=== TOURNAMENT RESULTS ===",
            "Rank | Strategy          | Score | Avg   | Std   | Wins | Matches",
            "-----|-------------------|-------|-------|-------|------|--------",
        ]
        for rank, result in enumerate(results, start=1):
            lines.append(
                f"{rank:>4} | {result.name:<17} | {_format_number(result.total_score):>5} | "
                f"{result.average_score:>5.2f} | {result.std_deviation:>5.2f} | "
                f"{result.wins:>4} | {result.matches_played:>6}"
            )
        return lines


def _format_number(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def simulate_tournament(
    rounds: int = DEFAULT_ROUNDS_PER_MATCH,
    error_rate: float = DEFAULT_ERROR_RATE,
    payoff_matrix: PayoffMatrix = DEFAULT_PAYOFF_MATRIX,
    seed: Optional[Seed] = None,
    format: Optional[TournamentFormat] = None,
    double_round_robin: bool = False,
    strategies: Optional[Sequence[Strategy]] = None,
) -> TournamentOutcome:
    """Run a tournament with defaults for everything not supplied.

    Args:
        rounds: Rounds per match
        error_rate: Per-move noise probability
        payoff_matrix: Reward table
        seed: Optional seed for reproducible runs
        format: Tournament format; defaults to single round-robin
        double_round_robin: Shorthand for DoubleRoundRobin when no format is given
        strategies: Participants; defaults to the built-in strategy pool

    Returns:
        TournamentOutcome
    """
    if strategies is None:
        strategies = DEFAULT_STRATEGIES

    if format is None:
        format = DoubleRoundRobin() if double_round_robin else DEFAULT_TOURNAMENT_FORMAT

    return Tournament().run_with_format(format, strategies, rounds, error_rate, payoff_matrix, seed)


def format_to_dict(format: TournamentFormat) -> Dict[str, Any]:
    """Convert a tournament format to plain data."""
    data: Dict[str, Any] = {"kind": format.kind}
    if isinstance(format, SwissFormat):
        data["rounds"] = format.rounds
        data["tie_breaker"] = TieBreaker(format.tie_breaker).value if format.tie_breaker else None
    return data


def outcome_to_dict(outcome: TournamentOutcome) -> Dict[str, Any]:
    """Convert a tournament outcome to JSON-friendly plain data."""
    return {
        "format": format_to_dict(outcome.format),
        "results": [asdict(result) for result in outcome.results],
        "swiss_rounds": (
            [asdict(summary) for summary in outcome.swiss_rounds]
            if outcome.swiss_rounds is not None else None
        ),
        "ratings": dict(outcome.ratings),
    }
