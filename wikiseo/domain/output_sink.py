"""Output sink interface - the host page that generators write into."""
from abc import ABC, abstractmethod


class OutputSink(ABC):
    """Write-only view of the host output page.

    Generators must only use these three operations.
    """

    @abstractmethod
    def set_title(self, text: str) -> None:
        """Set the HTML title of the page."""
        pass

    @abstractmethod
    def add_meta_tag(self, name: str, content: str) -> None:
        """Add a ``<meta name=... content=...>`` tag."""
        pass

    @abstractmethod
    def add_head_item(self, key: str, html: str) -> None:
        """Add a raw HTML fragment to the page head, keyed for de-duplication."""
        pass
