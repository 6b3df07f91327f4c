import logging
from pathlib import Path
from typing import Callable

from .document import HtmlDocument
from .errors import MissingParameterError, SourceNotFoundError
from .filenames import append_timestamp_to_file
from .interfaces import (
    ConversionRequest,
    ConversionResult,
    RenderJob,
    RendererGateway,
    SourceGateway,
    normalize_margin,
)

logger = logging.getLogger(__name__)


def is_remote_source(src: str) -> bool:
    return src.lower().startswith(("http://", "https://"))


class ConversionService:
    """Core domain service turning HTML requests into PDF files.

    This service is framework-agnostic. The HTTP API and the CLI both call
    :meth:`convert`; file access and the headless browser are reached through
    gateways so they can be replaced in tests.
    """

    def __init__(
        self,
        sources: SourceGateway,
        renderer: RendererGateway,
        *,
        page_format: str = "A4",
        uniquify: Callable[[str], str] = append_timestamp_to_file,
    ) -> None:
        self._sources = sources
        self._renderer = renderer
        self._page_format = page_format
        self._uniquify = uniquify

    @staticmethod
    def validate(request: ConversionRequest) -> None:
        if (not request.html and not request.html_src) or not request.output_path:
            logger.warning("Rejected request: html or htmlSrc, and outputPath are required")
            raise MissingParameterError("missing required parameters: html or htmlSrc, and outputPath")

    async def convert(self, request: ConversionRequest) -> ConversionResult:
        self.validate(request)
        assert request.output_path is not None

        if request.css_path and not self._sources.exists(request.css_path):
            raise SourceNotFoundError(request.css_path)

        output_path = self._uniquify(request.output_path)
        margin = normalize_margin(request.margin)

        if not request.html and is_remote_source(str(request.html_src)):
            return await self._convert_remote(request, output_path, margin)

        html, base_dir = self._load_html(request)
        document = HtmlDocument(html)

        # Inline first so extracted header/footer fragments carry data URIs too
        inlined = await document.inline_images(base_dir)

        header = document.extract_part(request.header_query)
        footer = document.extract_part(request.footer_query)
        if header:
            logger.debug("Header found for %r", request.header_query)
        if footer:
            logger.debug("Footer found for %r", request.footer_query)

        await self._renderer.render(
            RenderJob(
                output_path=output_path,
                html=document.to_html(),
                header_template=header or request.header_template,
                footer_template=footer or request.footer_template,
                margin=margin,
                css_path=request.css_path,
                page_format=self._page_format,
            )
        )
        logger.info("PDF saved to %s", output_path)
        return ConversionResult(
            output_path=output_path,
            header_found=header is not None,
            footer_found=footer is not None,
            inlined_images=inlined,
        )

    def _load_html(self, request: ConversionRequest) -> tuple[str, Path | None]:
        if request.html:
            return request.html, None

        src = str(request.html_src)
        logger.info("Reading HTML from %s", src)
        content = self._sources.read_text(src)
        if content is None:
            raise SourceNotFoundError(src)
        logger.debug("Finished reading HTML from %s", src)
        return content, Path(src).resolve().parent

    async def _convert_remote(
        self, request: ConversionRequest, output_path: str, margin: dict[str, str]
    ) -> ConversionResult:
        if request.header_query or request.footer_query:
            logger.warning("Header/footer queries are ignored for remote page %s", request.html_src)
        await self._renderer.render(
            RenderJob(
                output_path=output_path,
                source_url=request.html_src,
                header_template=request.header_template,
                footer_template=request.footer_template,
                margin=margin,
                css_path=request.css_path,
                page_format=self._page_format,
            )
        )
        logger.info("PDF saved to %s", output_path)
        return ConversionResult(output_path=output_path)
