# agents/frontier.py

from collections import OrderedDict
from typing import Iterator, Optional, Tuple

Position = Tuple[int, int]


class FrontierQueue:
    """
    FIFO queue of coordinates that rejects duplicates.
    A coordinate may be re-added once it has been removed.
    """

    def __init__(self):
        self._queue: "OrderedDict[Position, None]" = OrderedDict()

    def add(self, position: Position) -> bool:
        """Enqueue `position` unless it is already waiting. Returns True if added."""
        position = tuple(position)
        if position in self._queue:
            return False
        self._queue[position] = None
        return True

    def remove(self) -> Optional[Position]:
        """Pop the oldest coordinate, or None when empty."""
        if not self._queue:
            return None
        position, _ = self._queue.popitem(last=False)
        return position

    def is_empty(self) -> bool:
        return not self._queue

    def __len__(self) -> int:
        return len(self._queue)

    def __contains__(self, position) -> bool:
        return tuple(position) in self._queue

    def __iter__(self) -> Iterator[Position]:
        return iter(self._queue)
