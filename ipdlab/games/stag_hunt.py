"""Stag Hunt payoff preset."""

from .matrix_factory import create_payoff_preset

PRESET = create_payoff_preset(
    id="stag_hunt",
    name="Stag Hunt",
    description="""Coordinated cooperation pays best; mutual defection is safer but less rewarding.

- Both hunting stag (4,4) is the payoff-dominant equilibrium
- Hunting hare alone still pays 3, so defection is the safe choice
- Trust, not temptation, is what breaks cooperation here""",
    temptation=3,
    reward=4,
    punishment=2,
    sucker=0,
)
