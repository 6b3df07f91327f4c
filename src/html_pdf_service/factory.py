from html_pdf_service import settings
from html_pdf_service.conversion import ConversionService
from html_pdf_service.conversion.adapters import LocalFiles, PlaywrightRenderer


def build_service() -> ConversionService:
    """Conversion service wired to the local filesystem and headless Chromium, per settings."""
    return ConversionService(
        sources=LocalFiles(),
        renderer=PlaywrightRenderer(
            headless=settings.PLAYWRIGHT_HEADLESS,
            timeout_ms=settings.PLAYWRIGHT_TIMEOUT,
        ),
        page_format=settings.PDF_PAGE_FORMAT,
    )
