"""In-memory OutputSink that collects everything written to the page head."""
from typing import Dict, List, Optional, Tuple

from markupsafe import Markup

from wikiseo.domain.output_sink import OutputSink


class OutputPage(OutputSink):
    """Collects the title, meta tags and head items written by generators.

    Used by hosts that render the head themselves and by tests.
    """

    def __init__(self):
        self.html_title: Optional[str] = None
        self._meta_tags: List[Tuple[str, str]] = []
        self._head_items: Dict[str, str] = {}

    def set_title(self, text: str) -> None:
        self.html_title = text

    def add_meta_tag(self, name: str, content: str) -> None:
        self._meta_tags.append((name, content))

    def add_head_item(self, key: str, html: str) -> None:
        # Same key replaces the earlier fragment, like the wiki's OutputPage
        self._head_items[key] = html

    def get_meta_tags(self) -> List[Tuple[str, str]]:
        return list(self._meta_tags)

    def get_head_items(self) -> Dict[str, str]:
        return dict(self._head_items)

    def get_meta_content(self, name: str) -> List[str]:
        """Get the content of every meta tag with the given name."""
        return [content for tag_name, content in self._meta_tags if tag_name == name]

    def render_head(self) -> str:
        """Render all collected tags as HTML, one per line."""
        lines = []
        if self.html_title is not None:
            lines.append(Markup("<title>{}</title>").format(self.html_title))
        for name, content in self._meta_tags:
            lines.append(Markup('<meta name="{}" content="{}"/>').format(name, content))
        lines.extend(Markup(html) for html in self._head_items.values())
        return "\n".join(lines)
