"""Simulate a round with a random agent in seat 0."""

from unotable.agents.random_agent import RandomAgent
from unotable.orchestration.game_runner import GameRunner


class NarratingAgent(RandomAgent):
    def get_action(self, snapshot, legal_actions):
        # Log the last move from history to see the round progress
        if snapshot.history:
            print(f"> {snapshot.history[-1]}")
        return super().get_action(snapshot, legal_actions)


def main():
    runner = GameRunner(NarratingAgent("Bot0", seed=42), seat_count=4, seed=42)
    result = runner.run()

    print(f"Round finished! Winner: {result.winner_name}")
    print(f"Actions by seat 0: {result.num_actions}")
    print(f"Events logged: {len(result.history)}")


if __name__ == "__main__":
    main()
