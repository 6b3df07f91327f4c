import asyncio
import logging
from pathlib import Path
from urllib.parse import unquote, urlparse

from bs4 import BeautifulSoup, Tag
from soupsieve import SelectorSyntaxError

from .errors import InvalidSelectorError
from .images import image_file_to_data_uri

logger = logging.getLogger(__name__)

STYLE_SELECTOR = "style, link[rel~='stylesheet']"
REMOTE_PREFIXES = ("http://", "https://", "//")


class HtmlDocument:
    """Mutable HTML tree prepared for PDF rendering.

    Parsed with lxml through BeautifulSoup. A document belongs to one
    conversion request: parts extracted as header/footer are removed from it
    and images are rewritten in place.
    """

    def __init__(self, html: str) -> None:
        self._soup = BeautifulSoup(html, "lxml")

    @property
    def soup(self) -> BeautifulSoup:
        return self._soup

    def head_styles(self) -> str:
        """Markup of every <style> and stylesheet <link> in <head>, in document order."""
        head = self._soup.head
        if head is None:
            return ""
        return "".join(str(element) for element in head.select(STYLE_SELECTOR))

    def extract_part(self, query: str | None) -> str | None:
        """Detach the first element matching ``query`` and return it as a standalone fragment.

        The fragment carries the head styles so it renders like it did in the
        page. Returns None (document untouched) when ``query`` is empty or
        nothing matches; only the first of several matches is taken.
        """
        if not query:
            return None

        styles = self.head_styles()
        try:
            part = self._soup.select_one(query)
        except SelectorSyntaxError as e:
            raise InvalidSelectorError(f"invalid selector {query!r}: {e}") from e

        if part is None:
            logger.debug("No element found for selector %r", query)
            return None

        content = f"<div>{styles} {part}</div>"
        part.decompose()
        return content

    async def inline_images(self, base_dir: str | Path | None = None) -> int:
        """Rewrite local <img> sources to base64 data URIs, all images concurrently.

        Relative sources resolve against ``base_dir`` (default: working
        directory). Images that cannot be read keep their original source.
        Returns how many images were inlined.
        """
        base = Path(base_dir) if base_dir else Path.cwd()
        pending = [
            img
            for img in self._soup.find_all("img")
            if img.get("src") and not img["src"].lower().startswith("data:")
        ]
        if not pending:
            return 0
        results = await asyncio.gather(*(self._inline_image(img, base) for img in pending))
        inlined = sum(results)
        logger.debug("Inlined %d of %d images", inlined, len(pending))
        return inlined

    async def _inline_image(self, img: Tag, base: Path) -> bool:
        src = str(img["src"])
        if src.lower().startswith(REMOTE_PREFIXES):
            logger.debug("Leaving remote image %s to the browser", src)
            return False
        try:
            path = resolve_image_path(src, base)
            img["src"] = await asyncio.to_thread(image_file_to_data_uri, path)
        except (OSError, ValueError, RuntimeError) as e:
            logger.warning("Could not inline image %s: %s", src, e)
            return False
        return True

    def to_html(self) -> str:
        return str(self._soup)


def resolve_image_path(src: str, base: Path) -> Path:
    """Map an <img> source to a local path; relative paths and ``file:`` URIs join ``base``."""
    if src.lower().startswith("file:"):
        src = unquote(urlparse(src).path)
    path = Path(src)
    return path if path.is_absolute() else base / path
