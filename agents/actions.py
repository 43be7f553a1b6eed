# agents/actions.py

from dataclasses import dataclass
from enum import IntEnum


class ActionType(IntEnum):
    LEAVE = 0
    UNCOVER = 1
    FLAG = 2
    UNFLAG = 3  # host-initiated only; agents never emit it


@dataclass(frozen=True)
class Action:
    """A single move. LEAVE ignores its coordinates."""
    action_type: ActionType
    x: int = 0
    y: int = 0

    @classmethod
    def leave(cls) -> "Action":
        return cls(ActionType.LEAVE)

    @classmethod
    def uncover(cls, x: int, y: int) -> "Action":
        return cls(ActionType.UNCOVER, x, y)

    @classmethod
    def flag(cls, x: int, y: int) -> "Action":
        return cls(ActionType.FLAG, x, y)

    @classmethod
    def unflag(cls, x: int, y: int) -> "Action":
        return cls(ActionType.UNFLAG, x, y)

    @property
    def position(self):
        return (self.x, self.y)

    def to_dict(self) -> dict:
        if self.action_type is ActionType.LEAVE:
            return {"type": "leave"}
        return {"type": self.action_type.name.lower(), "x": self.x, "y": self.y}
