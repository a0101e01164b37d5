import random
import threading
import time
import uuid
from typing import Any, Dict, List, Optional, Sequence

from . import counters

SEED_CHANNELS = [
    "Aiden Thompson",
    "Cornelia Blair",
    "Victoria Brown",
    "Todd Welch",
    "Scotty Cranmer",
    "Emily Harper",
    "Ethan Patel",
]

SEED_NAMES = [
    "Noah Duncan",
    "Terry Wong",
    "Janice Rodriguez",
    "Mattie Casarez",
    "Gary Wong",
    "Theodore Duncan",
    "Martin Evergreen",
    "Maria Aziz",
]

SEED_COMMENTS = [
    "This was so helpful, I watched it twice and picked up something new each time.",
    "The editing on this one is on another level. Great work!",
    "I never thought about it this way before. Subscribed.",
    "Can you make a follow-up on this? I have so many questions.",
    "Just tried this myself and it actually worked. Thank you!",
    "The views at the end were absolutely breathtaking.",
    "I've been waiting for a video like this for months.",
    "Clear, concise and fun to watch. More of this please.",
]

VIEWS_RANGE = (1_000, 1_000_999)
LIKES_RANGE = (500, 110_499)
COMMENT_LIKES_RANGE = (0, 999)

# seed comment N is N steps older than seed comment 0
COMMENT_AGE_STEP_MS = 24 * 60 * 60 * 1000


def now_ms() -> int:
    return int(time.time() * 1000)


def new_id() -> str:
    return str(uuid.uuid4())


class RoundRobinPicker:
    """Cursor over a shuffled copy of a fixed list.

    A full cycle of len(items) picks returns every item exactly once; the
    order is reshuffled each time the cursor wraps back to zero.
    """

    def __init__(self, items: Sequence[str], rng: Optional[random.Random] = None):
        if not items:
            raise ValueError("RoundRobinPicker needs at least one item")
        self._rng = rng or random.Random()
        self._order = list(items)
        self._rng.shuffle(self._order)
        self._cursor = 0

    def next(self) -> str:
        item = self._order[self._cursor]
        self._cursor = (self._cursor + 1) % len(self._order)
        if self._cursor == 0:
            self._rng.shuffle(self._order)
        return item


class SeedGenerator:
    """Synthetic data for new videos: channel, counters and seed comments.

    One instance lives for the whole process and is handed to the service;
    its pickers keep their position between requests but nothing is saved
    to disk.

    Calls may come from several threads; the lock keeps each picker cycle whole.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        channels: Sequence[str] = SEED_CHANNELS,
        names: Sequence[str] = SEED_NAMES,
        comments: Sequence[str] = SEED_COMMENTS,
    ):
        self.rng = rng or random.Random()
        self.channels = RoundRobinPicker(channels, self.rng)
        self.names = RoundRobinPicker(names, self.rng)
        self.comments = RoundRobinPicker(comments, self.rng)
        self._lock = threading.Lock()

    def channel(self) -> str:
        with self._lock:
            return self.channels.next()

    def views(self) -> str:
        with self._lock:
            n = self.rng.randint(*VIEWS_RANGE)
        return counters.encode(n)

    def likes(self) -> str:
        with self._lock:
            n = self.rng.randint(*LIKES_RANGE)
        return counters.encode(n)

    def seed_comments(self, count: int, now: Optional[int] = None) -> List[Dict[str, Any]]:
        base = now_ms() if now is None else now
        out = []
        with self._lock:
            for i in range(count):
                out.append({
                    "id": new_id(),
                    "name": self.names.next(),
                    "comment": self.comments.next(),
                    "likes": self.rng.randint(*COMMENT_LIKES_RANGE),
                    "timestamp": base - i * COMMENT_AGE_STEP_MS,
                })
        return out
