"""Prisoner's Dilemma payoff preset."""

from .matrix_factory import create_payoff_preset

PRESET = create_payoff_preset(
    id="prisoners_dilemma",
    name="Prisoner's Dilemma",
    description="""Classic dilemma with the ordering T > R > P > S.

- Mutual cooperation (3,3) yields the best collective outcome
- Defection tempts with 5 if the opponent cooperates
- Mutual defection (1,1) is the one-shot Nash equilibrium
- In repeated play, reciprocal strategies can sustain cooperation""",
    temptation=5,
    reward=3,
    punishment=1,
    sucker=0,
)
