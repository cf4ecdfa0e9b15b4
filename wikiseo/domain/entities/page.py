"""Page domain entity - what the generators know about the rendered page."""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, Optional


@dataclass(frozen=True)
class PageFile:
    """A file attached to (used on) the page."""
    name: str
    url: str
    width: Optional[int] = None
    height: Optional[int] = None


@dataclass(frozen=True)
class Page:
    """The page being rendered.

    Attributes:
        id: Article ID, None when the page does not exist yet
        title: Display title of the page (without any site suffix)
        full_url: Canonical URL, may be protocol-relative ("//host/path")
        protocol: Scheme of the current request ("http" or "https")
        first_revision_at: Timestamp of the first revision
        latest_revision_at: Timestamp of the latest revision
        files: Attached files keyed by file name
    """
    id: Optional[int]
    title: str
    full_url: str
    protocol: str = "https"
    first_revision_at: Optional[datetime] = None
    latest_revision_at: Optional[datetime] = None
    files: Dict[str, PageFile] = field(default_factory=dict)

    def has_identity(self) -> bool:
        """Check whether the page can be looked up in storage."""
        return self.id is not None and self.id > 0

    def get_file(self, name: str) -> Optional[PageFile]:
        """Find an attached file by name, with or without the File: prefix."""
        name = name.strip()
        if name.lower().startswith("file:"):
            name = name[len("file:"):].strip()

        if name in self.files:
            return self.files[name]

        # Wiki file names treat spaces and underscores alike
        return self.files.get(name.replace(" ", "_")) or self.files.get(name.replace("_", " "))
