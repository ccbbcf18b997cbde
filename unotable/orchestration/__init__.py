"""Round orchestration."""

from unotable.orchestration.game_runner import GameRunner, RoundResult
from unotable.orchestration.scheduler import ComputerTurn, TurnScheduler
from unotable.orchestration.series import run_series

__all__ = ["ComputerTurn", "GameRunner", "RoundResult", "TurnScheduler", "run_series"]
