# backend/game.py

import logging

from agents.actions import ActionType

from .board import MinesweeperBoard
from .tiles import NO_RESULT, Result

logger = logging.getLogger(__name__)

ACTION_NAMES = ("uncover", "flag", "unflag")


class GameSession:
    """
    A wrapper around MinesweeperBoard that manages game state and turn flow.
    It is the host side of the agent protocol: it applies moves to the real
    board and reports their outcomes back to the agent.
    """

    def __init__(self, width: int, height: int, num_mines: int, start_x: int = 0, start_y: int = 0, seed: int = None):
        self.width = width
        self.height = height
        self.num_mines = num_mines
        self.start_x = start_x
        self.start_y = start_y
        self.seed = seed

        self.reset()

    def reset(self):
        """
        Reset the game session to a fresh board with the same parameters.
        """
        self.board = MinesweeperBoard(
            self.width, self.height, self.num_mines, self.start_x, self.start_y, seed=self.seed
        )
        self.game_over = False
        self.won = False
        self.moves_made = 0
        self.last_result = None

    def step(self, action: str, x: int, y: int) -> dict:
        """
        Apply an action ("uncover", "flag" or "unflag") at position (x, y).
        Returns a dict describing the game state after the action.
        """
        if action not in ACTION_NAMES:
            raise ValueError(f"Unknown action {action!r}; expected one of {ACTION_NAMES}.")

        if self.game_over:
            return self.get_state()

        if action == "uncover":
            self.uncover(x, y)
        elif action == "flag":
            self.board.place_flag(x, y)
            self.last_result = NO_RESULT
        else:
            self.board.remove_flag(x, y)
            self.last_result = NO_RESULT

        self.moves_made += 1
        return self.get_state()

    def uncover(self, x: int, y: int) -> Result:
        result = self.board.uncover(x, y)
        if result.is_mine_hit:
            self.game_over = True
            self.won = False
        elif self.board.is_game_won():
            self.game_over = True
            self.won = True
        self.last_result = result
        return result

    def apply_action(self, action) -> Result:
        """
        Apply an agent Action. Returns the feedback to report back to the
        agent: the uncover Result, or NO_RESULT for every other move.
        """
        if action.action_type is ActionType.LEAVE:
            return NO_RESULT
        self.step(action.action_type.name.lower(), action.x, action.y)
        if action.action_type is ActionType.UNCOVER:
            return self.last_result
        return NO_RESULT

    def play_agent(self, agent, open_first: bool = False, max_moves: int = None) -> list:
        """
        Run the turn loop until the game ends, the agent leaves, or the
        agent breaks protocol.

        open_first:
            If True the host uncovers (start_x, start_y) itself and reports
            that result with the first request; otherwise the first request
            carries NO_RESULT and the agent picks its own opening.

        Returns:
            A list of frames, one per move the agent returned:
            {"action": Action, "result": Result, "board": MinesweeperBoard}
            where "board" is a clone taken after the move.
        """
        frames = []
        feedback = NO_RESULT

        if open_first and not self.game_over:
            feedback = self.uncover(self.start_x, self.start_y)
            self.moves_made += 1
            if self.game_over:
                self._log_end("host opening")
                return frames

        while not self.game_over:
            if max_moves is not None and len(frames) >= max_moves:
                logger.info("Stopping after %d agent moves", max_moves)
                break

            action = agent.get_action(feedback)
            if action is None:
                logger.error("Agent %s broke the move protocol; stopping", type(agent).__name__)
                break

            if action.action_type is ActionType.LEAVE:
                frames.append({"action": action, "result": NO_RESULT, "board": self.board.clone()})
                logger.info("Agent left after %d moves", self.moves_made)
                break

            feedback = self.apply_action(action)
            frames.append({"action": action, "result": feedback, "board": self.board.clone()})

            if feedback.is_invalid:
                logger.error("Agent requested an invalid uncover at %s; stopping", action.position)
                break

        self._log_end("agent")
        return frames

    def _log_end(self, who):
        if self.won:
            logger.info("Game won by %s in %d moves", who, self.moves_made)
        elif self.game_over:
            logger.info("Mine hit by %s after %d moves", who, self.moves_made)

    def get_state(self) -> dict:
        """
        Return the current visible board and game status.
        """
        return {
            "board": self.board.get_visible_state(reveal_mines=self.game_over),
            "game_over": self.game_over,
            "won": self.won,
            "moves_made": self.moves_made,
            "dimensions": (self.width, self.height),
            "num_mines": self.num_mines,
            "start": (self.start_x, self.start_y),
        }

    def is_game_over(self) -> bool:
        return self.game_over

    def is_win(self) -> bool:
        return self.won

    def get_score(self) -> float:
        """
        Fraction of safe tiles revealed so far.
        """
        safe_tiles = self.width * self.height - self.num_mines
        return self.board.count_revealed() / safe_tiles
