"""Resolves the share image for a page from metadata, attachments and settings."""
import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from wikiseo.config import Settings
from wikiseo.domain.entities.page import Page
from wikiseo.utils.url_utils import is_url, protocolize_url

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolvedImage:
    """An absolute image URL with optional dimensions."""
    url: str
    width: Optional[int] = None
    height: Optional[int] = None
    alt: Optional[str] = None


def _to_int(value: Any) -> Optional[int]:
    try:
        return int(value) if value else None
    except (TypeError, ValueError):
        return None


def resolve_image(metadata: Mapping[str, Any], page: Page, settings: Settings) -> Optional[ResolvedImage]:
    """Find the image to advertise for a page.

    Resolution order:
    1. The ``image`` attribute (first one if several), looked up among the
       files attached to the page; a URL is used as is.
    2. The DEFAULT_IMAGE setting.

    Returns:
        ResolvedImage, or None if no image is available
    """
    image = metadata.get("image")
    if isinstance(image, (list, tuple)):
        image = image[0] if image else None

    width = _to_int(metadata.get("image_width"))
    height = _to_int(metadata.get("image_height"))
    alt = metadata.get("image_alt") or None

    url = None
    if image:
        page_file = page.get_file(image)
        if page_file is not None:
            url = page_file.url
            width = width or page_file.width
            height = height or page_file.height
        elif is_url(image):
            url = image
        else:
            logger.debug(f"Image '{image}' is not attached to page '{page.title}', using default")

    if url is None and settings.DEFAULT_IMAGE and settings.DEFAULT_IMAGE.strip():
        # Dimensions given for another image do not apply to the default
        url = settings.DEFAULT_IMAGE.strip()
        width = height = None

    if url is None:
        return None

    return ResolvedImage(
        url=protocolize_url(url, page.protocol),
        width=width,
        height=height,
        alt=alt,
    )
