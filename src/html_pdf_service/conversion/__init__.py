"""
Domain layer for HTML to PDF conversion.
Provides the document transformations (header/footer extraction, image
inlining), gateways for file access and rendering, and a service that
orchestrates them so front-ends (HTTP or CLI) share the same core logic.
"""

from .document import HtmlDocument
from .errors import (
    ConversionError,
    InvalidSelectorError,
    MissingParameterError,
    RenderError,
    SourceNotFoundError,
)
from .filenames import append_timestamp_to_file
from .interfaces import ConversionRequest, ConversionResult, RenderJob, RendererGateway, SourceGateway
from .service import ConversionService
