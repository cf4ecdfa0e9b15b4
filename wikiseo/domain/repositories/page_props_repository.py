"""Page property repository interface - abstraction for the host's page_props store."""
from abc import ABC, abstractmethod
from typing import Optional


class PagePropsRepository(ABC):
    """Repository interface for serialized page properties.

    Implementations raise StorageReadError / StorageWriteError when the
    backing store fails, so callers can fall back without knowing the
    storage technology.
    """

    @abstractmethod
    def get(self, page_id: int, name: str) -> Optional[str]:
        """Get a property value, None if it is not set."""
        pass

    @abstractmethod
    def set(self, page_id: int, name: str, value: str) -> None:
        """Create or replace a property value."""
        pass

    @abstractmethod
    def delete(self, page_id: int, name: str) -> bool:
        """Delete a property. Returns True if it existed."""
        pass
