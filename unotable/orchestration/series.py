"""Series - run many rounds and count wins per seat."""

import random
from collections import defaultdict

from unotable.agents.random_agent import RandomAgent
from unotable.orchestration.game_runner import GameRunner


def run_series(
    seat_count: int = 2,
    num_rounds: int = 100,
    seed: int | None = None,
    hand_size: int = 7,
) -> dict[str, int]:
    """Run num_rounds headless rounds with a random stand-in for seat 0.

    Every round is dealt from its own seed drawn from `seed`, so a series
    is reproducible as a whole.

    Returns:
        Dict mapping seat name to number of wins. Rounds that stop
        without a winner are counted under "no winner".
    """
    wins: dict[str, int] = defaultdict(int)

    rng = random.Random(seed)
    for _ in range(num_rounds):
        round_seed = rng.randint(0, 2**31 - 1)
        agent = RandomAgent(seed=round_seed)
        runner = GameRunner(agent, seat_count=seat_count, seed=round_seed, hand_size=hand_size)
        result = runner.run()
        wins[result.winner_name or "no winner"] += 1

    return dict(wins)
