"""Configuration constants for the ipdlab package."""

import logging
import os

logger = logging.getLogger(__name__)

# Match defaults - configurable via environment variables
# Rounds played per pairing when callers do not say otherwise
DEFAULT_ROUNDS_PER_MATCH = int(os.environ.get("IPDLAB_ROUNDS_PER_MATCH", "100"))
# Probability that an enacted move is inverted
DEFAULT_ERROR_RATE = float(os.environ.get("IPDLAB_ERROR_RATE", "0.0"))

# Elo ratings
DEFAULT_ELO_BASE_RATING = float(os.environ.get("IPDLAB_ELO_BASE_RATING", "1500"))
DEFAULT_ELO_K_FACTOR = float(os.environ.get("IPDLAB_ELO_K_FACTOR", "24"))

# Genetic operators and evolution
DEFAULT_MUTATION_RATE = float(os.environ.get("IPDLAB_MUTATION_RATE", "0.05"))
DEFAULT_TOURNAMENT_SELECTION_SIZE = int(
    os.environ.get("IPDLAB_TOURNAMENT_SELECTION_SIZE", "3")
)
# Rounds per match used by the default fitness evaluator
DEFAULT_FITNESS_ROUNDS = int(os.environ.get("IPDLAB_FITNESS_ROUNDS", "100"))

# Swiss round summaries keep this many leaderboard rows
SWISS_LEADERBOARD_SIZE = 5

logger.debug(
    "Loaded defaults: rounds=%d error_rate=%.3f elo_k=%.1f",
    DEFAULT_ROUNDS_PER_MATCH,
    DEFAULT_ERROR_RATE,
    DEFAULT_ELO_K_FACTOR,
)
