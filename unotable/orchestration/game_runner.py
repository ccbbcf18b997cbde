"""Single round runner."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Optional

from unotable.engine.actions import DrawCard, apply_action, get_legal_actions
from unotable.engine.errors import RuleViolation
from unotable.engine.table import HUMAN_SEAT, EnginePhase
from unotable.engine.turn_engine import TurnEngine
from unotable.gateway.console import RecordedChoice
from unotable.orchestration.scheduler import TurnScheduler

if TYPE_CHECKING:
    from unotable.agents.protocol import AgentProtocol
    from unotable.gateway.protocol import AudioGateway, RenderGateway

logger = logging.getLogger(__name__)


@dataclass
class RoundResult:
    """Result of a completed round."""

    winner: Optional[int]
    winner_name: Optional[str]
    num_actions: int
    seat_count: int
    history: tuple[str, ...]


class GameRunner:
    """Runs a single round: an agent plays seat 0, the scheduler plays the rest."""

    def __init__(
        self,
        agent: "AgentProtocol",
        seat_count: int = 2,
        seed: Optional[int] = None,
        hand_size: int = 7,
        presentation_delay: float = 0.0,
        render: Optional["RenderGateway"] = None,
        audio: Optional["AudioGateway"] = None,
        max_actions: int = 5000,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self._agent = agent
        self._seat_count = seat_count
        self._seed = seed
        self._hand_size = hand_size
        self._delay = presentation_delay
        self._render = render
        self._audio = audio
        self._max_actions = max_actions
        self._sleep = sleep
        self.engine: Optional[TurnEngine] = None

    def run(self) -> RoundResult:
        """Run the round and return the result."""
        engine = TurnEngine.start(
            seat_count=self._seat_count,
            seed=self._seed,
            hand_size=self._hand_size,
            render=self._render,
            audio=self._audio,
            choice=RecordedChoice(),
        )
        self.engine = engine
        scheduler = TurnScheduler(engine, presentation_delay=self._delay, sleep=self._sleep)
        scheduler.prime()
        num_actions = 0

        try:
            while num_actions < self._max_actions:
                scheduler.run_until_idle()
                if engine.phase is EnginePhase.ROUND_ENDED:
                    break
                legal = get_legal_actions(engine.state, HUMAN_SEAT)
                if not legal:
                    logger.warning("seat %d has nothing to do but the round is not over", HUMAN_SEAT)
                    break

                action = self._agent.get_action(engine.snapshot(HUMAN_SEAT), legal)
                if action is None:
                    action = next((a for a in legal if isinstance(a, DrawCard)), legal[0])

                try:
                    apply_action(engine, HUMAN_SEAT, action)
                except RuleViolation as exc:
                    logger.warning("%s: %s", self._agent.name, exc)
                num_actions += 1
        finally:
            scheduler.close()

        state = engine.state
        if state.round_winner is None:
            logger.warning("round stopped after %d actions without a winner", num_actions)
        return RoundResult(
            winner=state.round_winner,
            winner_name=state.seats[state.round_winner].name if state.round_winner is not None else None,
            num_actions=num_actions,
            seat_count=state.seat_count,
            history=tuple(state.history),
        )
