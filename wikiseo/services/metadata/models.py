"""Data models for the metadata pipeline."""
import re
from dataclasses import dataclass, field, replace
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Optional, Tuple

from wikiseo.domain.entities.page import Page
from wikiseo.services.metadata.constants import METADATA_CONSTANTS, TitleMode

_LINE_BREAKS = re.compile(r"[\r\n]")


class PipelineStatus(str, Enum):
    """Terminal state of one pipeline run."""
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class TitlePolicy:
    """How the metadata title is combined with the page title."""
    mode: TitleMode = TitleMode.REPLACE
    separator: str = METADATA_CONSTANTS.DEFAULT_TITLE_SEPARATOR

    @classmethod
    def from_metadata(
        cls,
        metadata: Mapping[str, Any],
        default_mode: str = METADATA_CONSTANTS.DEFAULT_TITLE_MODE,
        default_separator: str = METADATA_CONSTANTS.DEFAULT_TITLE_SEPARATOR,
    ) -> "TitlePolicy":
        """Build the policy from normalized metadata, falling back to defaults.

        An unknown default mode is treated as replace.
        """
        mode_value = metadata.get("title_mode") or default_mode
        try:
            mode = TitleMode(mode_value)
        except ValueError:
            mode = TitleMode.REPLACE

        separator = metadata.get("title_separator") or default_separator
        return cls(mode=mode, separator=separator)

    def apply(self, meta_title: str, page_title: str) -> str:
        """Combine the titles and strip line breaks from the result."""
        if self.mode == TitleMode.APPEND:
            title = f"{page_title}{self.separator}{meta_title}"
        elif self.mode == TitleMode.PREPEND:
            title = f"{meta_title}{self.separator}{page_title}"
        else:
            title = meta_title

        return _LINE_BREAKS.sub("", title)


@dataclass(frozen=True)
class PipelineState:
    """Values threaded through the pipeline stages.

    Each stage returns a new state instead of mutating this one.
    """
    mode: str
    page: Page
    metadata: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))
    errors: Tuple[str, ...] = ()
    title: Optional[str] = None

    def with_metadata(self, metadata: Mapping[str, Any]) -> "PipelineState":
        return replace(self, metadata=MappingProxyType(dict(metadata)))

    def with_error(self, message: str) -> "PipelineState":
        return replace(self, errors=self.errors + (message,))

    def with_title(self, title: str) -> "PipelineState":
        return replace(self, title=title)


@dataclass(frozen=True)
class RenderResult:
    """Outcome of one pipeline run.

    Attributes:
        status: SUCCESS or ERROR
        html: Error block to show in place of the tag, empty on success
        metadata: Normalized metadata the generators received
        errors: User-facing error messages, in the order they happened
        title: HTML title that was set, None if unchanged
    """
    status: PipelineStatus
    html: str = ""
    metadata: Mapping[str, Any] = field(default_factory=dict)
    errors: Tuple[str, ...] = ()
    title: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == PipelineStatus.SUCCESS
