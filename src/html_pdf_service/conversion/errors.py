class ConversionError(Exception):
    """Base class for failures while turning HTML into a PDF."""


class MissingParameterError(ConversionError):
    """A required request field (html/htmlSrc, outputPath) was not supplied."""


class InvalidSelectorError(ConversionError):
    """A header/footer query is not a valid CSS selector."""


class SourceNotFoundError(ConversionError):
    """A referenced input file (HTML source, stylesheet) could not be read."""

    def __init__(self, path: str) -> None:
        super().__init__(f"source file not found: {path}")
        self.path = path


class RenderError(ConversionError):
    """The headless browser failed to produce the PDF."""
