"""Chicken payoff preset."""

from .matrix_factory import create_payoff_preset

PRESET = create_payoff_preset(
    id="chicken",
    name="Chicken",
    description="""Risky anti-coordination where backing down avoids the worst crash outcome.

- Daring against a swerver pays the most (4)
- Both daring is the worst outcome for everyone (0)
- No dominant strategy; outcomes hinge on reading commitment""",
    temptation=4,
    reward=3,
    punishment=0,
    sucker=1,
)
