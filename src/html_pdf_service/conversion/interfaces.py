from dataclasses import dataclass, field
from typing import Protocol

MARGIN_SIDES = ("top", "right", "bottom", "left")


@dataclass(frozen=True)
class ConversionRequest:
    output_path: str | None
    html: str | None = None
    html_src: str | None = None
    header_query: str | None = None
    footer_query: str | None = None
    header_template: str | None = None
    footer_template: str | None = None
    margin: dict[str, str] | None = None
    css_path: str | None = None

    @classmethod
    def from_params(cls, params: dict[str, object]) -> "ConversionRequest":
        """Build a request from the camelCase fields of the HTTP body / CLI parameter file."""

        def text(key: str) -> str | None:
            value = params.get(key)
            return str(value) if value not in (None, "") else None

        margin = params.get("margin")
        return cls(
            output_path=text("outputPath"),
            html=text("html"),
            html_src=text("htmlSrc"),
            header_query=text("headerQuery"),
            footer_query=text("footerQuery"),
            header_template=text("headerTemplate"),
            footer_template=text("footerTemplate"),
            margin=normalize_margin(margin) if isinstance(margin, dict) else None,
            css_path=text("cssPath"),
        )


@dataclass(frozen=True)
class RenderJob:
    """Everything the browser needs to print one PDF.

    Exactly one of ``html`` (markup to load) or ``source_url`` (page to
    navigate to) is expected.
    """

    output_path: str
    html: str | None = None
    source_url: str | None = None
    header_template: str | None = None
    footer_template: str | None = None
    margin: dict[str, str] = field(default_factory=dict)
    css_path: str | None = None
    page_format: str = "A4"

    @property
    def display_header_footer(self) -> bool:
        return bool(self.header_template or self.footer_template)


@dataclass
class ConversionResult:
    output_path: str
    header_found: bool = False
    footer_found: bool = False
    inlined_images: int = 0


class RendererGateway(Protocol):
    async def render(self, job: RenderJob) -> None:
        """Write the PDF described by ``job`` to ``job.output_path``."""


class SourceGateway(Protocol):
    def read_text(self, path: str) -> str | None:
        ...

    def exists(self, path: str) -> bool:
        ...


def normalize_margin(margin: dict[str, object] | None) -> dict[str, str]:
    """Keep the known sides that carry a value; numbers become pixel lengths."""
    if not margin:
        return {}
    result: dict[str, str] = {}
    for side in MARGIN_SIDES:
        value = margin.get(side)
        if value is None or value == "":
            continue
        result[side] = f"{value}px" if isinstance(value, (int, float)) else str(value)
    return result
