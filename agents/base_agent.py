# agents/base_agent.py

from typing import Any, Dict, Optional

from backend.tiles import NO_RESULT, Result
from agents.actions import Action


class BaseAgent:
    """
    Base class for Minesweeper agents driven by a host turn loop.

    The host asks for one move at a time and reports the outcome of the
    previous move with each request. Agents never see the real board.
    """

    def __init__(self, width: int, height: int, num_mines: int, start_x: int = 0, start_y: int = 0, config: Dict[str, Any] = None):
        """
        Initialize the agent with the board geometry, the host's opening
        coordinate and optional configuration.
        """
        self.width = width
        self.height = height
        self.num_mines = num_mines
        self.start_x = start_x
        self.start_y = start_y
        self.config = config or {}

    def get_action(self, feedback: Result = NO_RESULT) -> Optional[Action]:
        """
        Decide on the next move.

        Args:
            feedback: The outcome of the previously returned move: a count
                Result after an uncover, NO_RESULT otherwise.

        Returns:
            The next Action, or None if the host broke the call protocol.
        """
        raise NotImplementedError("Agent must implement get_action().")
