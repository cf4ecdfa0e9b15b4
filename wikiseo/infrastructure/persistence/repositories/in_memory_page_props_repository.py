"""In-memory implementation of PagePropsRepository.
Serves as the output-page cache and as a drop-in store for tests."""
from typing import Dict, Optional, Tuple

from wikiseo.domain.repositories.page_props_repository import PagePropsRepository


class InMemoryPagePropsRepository(PagePropsRepository):
    """In-memory page property storage keyed by (page id, property name)."""

    def __init__(self):
        self._props: Dict[Tuple[int, str], str] = {}

    def get(self, page_id: int, name: str) -> Optional[str]:
        return self._props.get((page_id, name))

    def set(self, page_id: int, name: str, value: str) -> None:
        self._props[(page_id, name)] = value

    def delete(self, page_id: int, name: str) -> bool:
        return self._props.pop((page_id, name), None) is not None

    def count(self) -> int:
        """Count stored properties."""
        return len(self._props)
