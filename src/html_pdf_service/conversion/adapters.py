import logging
from pathlib import Path

from .errors import RenderError
from .interfaces import RenderJob, RendererGateway, SourceGateway

logger = logging.getLogger(__name__)


class LocalFiles(SourceGateway):
    def __init__(self, encoding: str = "utf-8") -> None:
        self._encoding = encoding

    def read_text(self, path: str) -> str | None:
        """Return the file content, or None (logged) when it cannot be read."""
        try:
            return Path(path).read_text(encoding=self._encoding)
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Could not read file %s: %s", path, e)
            return None

    def exists(self, path: str) -> bool:
        return Path(path).is_file()


class PlaywrightRenderer(RendererGateway):
    """Print HTML to PDF with headless Chromium, one browser per call."""

    def __init__(self, *, headless: bool = True, timeout_ms: int = 30000) -> None:
        self._headless = headless
        self._timeout_ms = timeout_ms

    async def render(self, job: RenderJob) -> None:
        # Import here to avoid loading Playwright for callers that never render
        from playwright.async_api import async_playwright

        if not job.html and not job.source_url:
            raise RenderError("nothing to render: neither html nor source_url given")

        logger.info("Starting PDF generation -> %s", job.output_path)
        Path(job.output_path).parent.mkdir(parents=True, exist_ok=True)

        try:
            async with async_playwright() as p:
                browser = await p.chromium.launch(headless=self._headless)
                try:
                    page = await browser.new_page()
                    page.set_default_timeout(self._timeout_ms)

                    if job.html:
                        await page.set_content(job.html, wait_until="networkidle")
                    else:
                        logger.info("Loading page %s", job.source_url)
                        await page.goto(job.source_url, wait_until="networkidle")

                    if job.css_path:
                        await page.add_style_tag(path=job.css_path)

                    # Apply on-screen CSS instead of print-only rules
                    await page.emulate_media(media="screen")

                    await page.pdf(
                        path=job.output_path,
                        format=job.page_format,
                        print_background=True,
                        display_header_footer=job.display_header_footer,
                        header_template=job.header_template,
                        footer_template=job.footer_template,
                        margin=dict(job.margin) or None,
                    )
                finally:
                    await browser.close()
        except Exception as e:
            logger.error("PDF generation failed: %s", e)
            raise RenderError(str(e)) from e

        logger.info("PDF generated: %s", job.output_path)
