"""In-memory bird store (process lifetime, lost on restart)."""

import logging
import threading
from typing import Iterable, List, Optional

from birdapi.schemas.bird import Bird
from birdapi.stores.base import BirdStore

logger = logging.getLogger(__name__)


class InMemoryBirdStore(BirdStore):
    """
    Ordered list of birds guarded by a lock.

    The critical sections never await, so a plain threading lock is enough
    and it also holds if the store is shared with worker threads.
    """

    name = "memory"

    def __init__(self, birds: Optional[Iterable[Bird]] = None) -> None:
        self._birds: List[Bird] = list(birds or [])
        self._lock = threading.Lock()

    async def create_bird(self, bird: Bird) -> None:
        with self._lock:
            self._birds.append(bird)
            count = len(self._birds)
        logger.debug("Stored bird '%s' (%d in memory)", bird.species, count)

    async def get_birds(self) -> List[Bird]:
        # Birds are frozen, so a shallow copy is a safe snapshot
        with self._lock:
            return list(self._birds)
