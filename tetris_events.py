
"""Abstract input events and the bounded channel that orders them"""
import logging
from collections import deque
from dataclasses import dataclass
from typing import Iterator, Optional, Union

from tetris_config import CONFIG

log = logging.getLogger(__name__)

LEFT, RIGHT = -1, 1


@dataclass(frozen=True)
class Move:
    direction: int

@dataclass(frozen=True)
class SoftDrop:
    pass

@dataclass(frozen=True)
class Rotate:
    pass

@dataclass(frozen=True)
class Restart:
    pass

@dataclass(frozen=True)
class GravityTick:
    pass

@dataclass(frozen=True)
class RandomTick:
    value: int

Event = Union[Move, SoftDrop, Rotate, Restart, GravityTick, RandomTick]
EVENT_TYPES = (Move, SoftDrop, Rotate, Restart, GravityTick, RandomTick)


class EventQueue:
    """FIFO of pending events. Full queues refuse new events instead of
    evicting old ones, so arrival order is never rewritten."""
    def __init__(self, maxsize: Optional[int] = None):
        if maxsize is None:
            maxsize = int(CONFIG["EVENT_QUEUE_SIZE"])
        self.maxsize = maxsize
        self.items = deque()
        self.closed = False

    def __len__(self):
        return len(self.items)

    def offer(self, event: Event) -> bool:
        if self.closed:
            return False
        if len(self.items) >= self.maxsize:
            log.warning("event queue full (%d), dropping %r", self.maxsize, event)
            return False
        self.items.append(event)
        return True

    def poll(self) -> Optional[Event]:
        if self.closed or not self.items:
            return None
        return self.items.popleft()

    def drain(self) -> Iterator[Event]:
        while True:
            e = self.poll()
            if e is None:
                return
            yield e

    def close(self):
        self.closed = True
        self.items.clear()
