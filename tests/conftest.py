"""
Shared pytest fixtures.
"""

import os
from pathlib import Path

# IMPORTANT: Set environment variables BEFORE any imports from html_pdf_service
# so the settings module never writes log files into the working directory.
os.environ["APP_ENV"] = "test"
os.environ["LOG_TO_FILES"] = "false"
os.environ["LOG_LEVEL"] = "warning"

import pytest

from html_pdf_service.conversion import ConversionService, RenderError, RenderJob
from html_pdf_service.conversion.adapters import LocalFiles

HEADER_DOC = (
    "<html><head><style>.h{color:red}</style></head>"
    "<body><div class='h'>Hi</div><p>Body</p></body></html>"
)

PNG_BYTES = b"\x89PNG\r\n\x1a\nfake-image-bytes"


class FakeRenderer:
    """Records render jobs and writes a stub PDF instead of launching Chromium."""

    def __init__(self, error: Exception | None = None) -> None:
        self.jobs: list[RenderJob] = []
        self._error = error

    async def render(self, job: RenderJob) -> None:
        self.jobs.append(job)
        if self._error is not None:
            raise self._error
        Path(job.output_path).parent.mkdir(parents=True, exist_ok=True)
        Path(job.output_path).write_bytes(b"%PDF-1.4 fake pdf content")


@pytest.fixture
def renderer() -> FakeRenderer:
    return FakeRenderer()


@pytest.fixture
def failing_renderer() -> FakeRenderer:
    return FakeRenderer(error=RenderError("browser crashed"))


@pytest.fixture
def service(renderer) -> ConversionService:
    return ConversionService(sources=LocalFiles(), renderer=renderer)


@pytest.fixture
def site_dir(tmp_path: Path) -> Path:
    """A directory with an HTML page that references a local image and a stylesheet."""
    (tmp_path / "img").mkdir()
    (tmp_path / "img" / "logo.png").write_bytes(PNG_BYTES)
    (tmp_path / "extra.css").write_text("body { font-size: 12pt; }", encoding="utf-8")
    (tmp_path / "page.html").write_text(
        "<html><head><link rel='stylesheet' href='extra.css'></head><body>"
        "<header class='top'><img src='img/logo.png'> Report</header>"
        "<main>Content</main>"
        "<footer id='bottom'>Page footer</footer>"
        "</body></html>",
        encoding="utf-8",
    )
    return tmp_path
