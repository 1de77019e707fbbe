from abc import ABC, abstractmethod
from typing import List

from birdapi.schemas.bird import Bird


class BirdStore(ABC):
    """Abstract base class for bird record stores."""

    name: str = "abstract"

    @abstractmethod
    async def create_bird(self, bird: Bird) -> None:
        """Persist one record."""
        pass

    @abstractmethod
    async def get_birds(self) -> List[Bird]:
        """Return every stored record; an empty list when there are none."""
        pass

    async def ping(self) -> bool:
        """Report whether the backing storage is reachable."""
        return True

    async def close(self) -> None:
        """Release resources held by the store."""
        pass
