# agents/propagation_agent/agent.py

import logging
from collections import deque
from enum import Enum
from typing import Deque, Optional, Set, Tuple

from backend.tiles import NO_RESULT, Outcome, Result, TileState, is_revealed_count
from agents.actions import Action, ActionType
from agents.base_agent import BaseAgent
from agents.frontier import FrontierQueue
from agents.knowledge import BoardKnowledge

logger = logging.getLogger(__name__)

Position = Tuple[int, int]

ORIGIN: Position = (0, 0)


class AgentState(Enum):
    AWAITING_FIRST_MOVE = "awaiting_first_move"
    PROPAGATING = "propagating"
    EXHAUSTED = "exhausted"


class PropagationAgent(BaseAgent):
    """
    Deterministic solver that reasons about one numbered tile at a time.

    For a revealed count n with f flagged and h hidden neighbours:
        n - f == 0  -> every hidden neighbour is safe (uncover)
        n - f == h  -> every hidden neighbour is a mine (flag)
    Anything else is left alone; overlapping constraints are never combined.
    When no rule fires the agent uncovers the first unprocessed hidden tile
    (x outer, y inner), which may be a mine.

    The agent always opens at (0, 0), whatever (start_x, start_y) the host
    used for its own opening click. A result reported before the first
    returned move is attributed to (start_x, start_y).
    """

    def __init__(self, width: int, height: int, num_mines: int, start_x: int = 0, start_y: int = 0, config=None):
        super().__init__(width, height, num_mines, start_x, start_y, config)
        self.knowledge = BoardKnowledge(width, height)
        self.frontier = FrontierQueue()
        self.processed_positions: Set[Position] = set()
        self.move_queue: Deque[Action] = deque()
        self.pending_move: Optional[Action] = Action.uncover(start_x, start_y)
        self.state = AgentState.AWAITING_FIRST_MOVE

    # -------------------------------------------------------------------------
    # Host protocol
    # -------------------------------------------------------------------------

    def get_action(self, feedback=NO_RESULT) -> Optional[Action]:
        if isinstance(feedback, int):
            if not is_revealed_count(feedback):
                logger.warning("Rejected feedback %r: not an adjacent mine count", feedback)
                return None
            feedback = Result.count(feedback)

        if not self._accept_feedback(feedback):
            return None

        if not self.move_queue:
            self._run_round()

            if not self.move_queue:
                return self._final_sweep()

        return self._emit(self.move_queue.popleft())

    def _accept_feedback(self, feedback: Result) -> bool:
        pending = self.pending_move

        if feedback.outcome is Outcome.NO_RESULT:
            awaiting_count = (
                self.state is AgentState.PROPAGATING
                and pending is not None
                and pending.action_type is ActionType.UNCOVER
            )
            if awaiting_count:
                logger.warning("Protocol mismatch: no result reported for %r", pending)
                return False
            return True

        if not feedback.is_count:
            logger.warning("Protocol mismatch: %r is not valid feedback", feedback)
            return False

        if pending is None or pending.action_type is not ActionType.UNCOVER:
            logger.warning("Protocol mismatch: got %r but pending move was %r", feedback, pending)
            return False

        self.knowledge.record(pending.x, pending.y, feedback.value)
        self.processed_positions.add(pending.position)
        logger.debug("Recorded %d at %s", feedback.value, pending.position)
        return True

    def _emit(self, move: Action) -> Action:
        self.pending_move = move
        if move.action_type is ActionType.LEAVE:
            self.state = AgentState.EXHAUSTED
        else:
            self.state = AgentState.PROPAGATING
        logger.debug("Emitting %r", move)
        return move

    def _final_sweep(self) -> Action:
        for position in self.knowledge.hidden_positions():
            if position not in self.processed_positions:
                self.processed_positions.add(position)
                return self._emit(Action.uncover(*position))
        return self._emit(Action.leave())

    # -------------------------------------------------------------------------
    # Deduction
    # -------------------------------------------------------------------------

    def _run_round(self) -> None:
        while not self.move_queue:
            if ORIGIN not in self.processed_positions:
                self._queue_uncover(ORIGIN)
                return

            if self.knowledge.hidden_count() == 0:
                self.move_queue.append(Action.leave())
                return

            if self.frontier.is_empty():
                self.full_scan()
                if self.frontier.is_empty():
                    self.select_arbitrary_tile()
                return

            x, y = self.frontier.remove()
            if (x, y) in self.processed_positions:
                continue

            value = self.knowledge.get(x, y)
            if not is_revealed_count(value):
                continue

            self.apply_tile_logic(x, y, value)

    def _queue_uncover(self, position: Position) -> None:
        self.move_queue.append(Action.uncover(*position))
        self.frontier.add(position)
        self.processed_positions.add(position)

    def apply_tile_logic(self, x: int, y: int, value: int) -> None:
        flagged_count = 0
        hidden_neighbors = []

        for nx, ny in self.knowledge.neighbors(x, y):
            neighbor = self.knowledge.get(nx, ny)
            if neighbor == TileState.FLAGGED:
                flagged_count += 1
            elif neighbor == TileState.HIDDEN:
                hidden_neighbors.append((nx, ny))

        remaining_mines = value - flagged_count

        if remaining_mines == 0:
            for position in hidden_neighbors:
                if position not in self.processed_positions:
                    self._queue_uncover(position)
        elif remaining_mines == len(hidden_neighbors):
            for position in hidden_neighbors:
                self.move_queue.append(Action.flag(*position))
                self.knowledge.mark_flagged(*position)

        self.processed_positions.add((x, y))

    def full_scan(self) -> None:
        for x, y in self.knowledge.revealed_positions():
            value = self.knowledge.get(x, y)
            self.apply_tile_logic(x, y, value)
        logger.debug("Full scan queued %d moves", len(self.move_queue))

    def select_arbitrary_tile(self) -> bool:
        for position in self.knowledge.hidden_positions():
            if position not in self.processed_positions:
                logger.debug("No certain move; uncovering %s", position)
                self._queue_uncover(position)
                return True
        return False
