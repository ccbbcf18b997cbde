"""Turn scheduler - queues and runs computer-seat turns.

After every committed transition the engine notifies the scheduler, which
enqueues a turn for the active seat if it is a computer seat that may act.
Tasks carry the engine revision they were queued at; a task whose revision
is no longer current when it is dequeued is dropped.
"""

from __future__ import annotations

import logging
import time
from collections import deque
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Deque, List, Optional

if TYPE_CHECKING:
    from unotable.agents.computer_policy import ComputerPolicy
    from unotable.engine.turn_engine import TurnEngine

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ComputerTurn:
    """A queued turn for a computer seat."""

    seat_index: int
    revision: int


class TurnScheduler:
    """Runs queued computer turns one at a time, in order."""

    def __init__(
        self,
        engine: TurnEngine,
        presentation_delay: float = 0.0,
        sleep: Callable[[float], None] = time.sleep,
        policy: Optional[ComputerPolicy] = None,
    ):
        self._engine = engine
        self._delay = presentation_delay
        self._sleep = sleep
        self._policy = policy or engine.policy
        self._queue: Deque[ComputerTurn] = deque()
        self._unsubscribe = engine.subscribe(self._on_transition)

    @property
    def pending(self) -> List[ComputerTurn]:
        """Queued turns, oldest first."""
        return list(self._queue)

    def prime(self) -> None:
        """Queue a turn for the current state, e.g. right after the round starts."""
        self._on_transition(self._engine)

    def close(self) -> None:
        self._unsubscribe()
        self._queue.clear()

    def is_stale(self, task: ComputerTurn) -> bool:
        engine = self._engine
        if task.revision != engine.revision:
            return True
        seat = engine.state.seats[task.seat_index]
        return not (seat.is_computer and engine.can_act(task.seat_index))

    def step(self) -> bool:
        """Run the oldest queued turn. Returns False if the queue was empty."""
        if not self._queue:
            return False
        task = self._queue.popleft()
        if self.is_stale(task):
            logger.debug("dropped stale turn for seat %d (revision %d)", task.seat_index, task.revision)
            return True
        if self._delay > 0:
            self._sleep(self._delay)
            # The table may have moved on while we waited
            if self.is_stale(task):
                logger.debug("turn for seat %d went stale during the delay", task.seat_index)
                return True
        outcome = self._policy.run_turn(self._engine, task.seat_index)
        logger.info("seat %d turn: %s", task.seat_index, outcome)
        return True

    def run_until_idle(self, max_steps: int = 10_000) -> int:
        """Run queued turns, including the ones they chain into, until none are left.

        Returns the number of tasks dequeued.
        """
        steps = 0
        while steps < max_steps and self.step():
            steps += 1
        if self._queue:
            raise RuntimeError(f"Scheduler still busy after {max_steps} steps")
        return steps

    def _on_transition(self, engine: TurnEngine) -> None:
        seat_index = engine.state.active_seat_index
        if not engine.state.seats[seat_index].is_computer or not engine.can_act(seat_index):
            return
        task = ComputerTurn(seat_index=seat_index, revision=engine.revision)
        if task in self._queue:
            return
        self._queue.append(task)
        logger.debug("queued turn for seat %d at revision %d", seat_index, engine.revision)
