import logging

from fastapi import FastAPI, HTTPException
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import BaseModel, Field

from html_pdf_service import __version__, settings
from html_pdf_service.conversion import (
    ConversionRequest,
    InvalidSelectorError,
    MissingParameterError,
    RenderError,
    SourceNotFoundError,
)
from html_pdf_service.factory import build_service
from html_pdf_service.logging_config import configure_logging

configure_logging(settings.LOG_LEVEL, settings.LOGS_DIR, to_files=settings.LOG_TO_FILES)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="HTML to PDF Print Service",
    version=__version__,
    description=(
        "RESTful API for printing HTML documents to PDF with optional "
        "header/footer extraction and inlined local images."
    ),
)

SERVICE = build_service()


class PageMargin(BaseModel):
    """CSS lengths per side; bare numbers are taken as pixels."""

    top: str | int | float | None = None
    right: str | int | float | None = None
    bottom: str | int | float | None = None
    left: str | int | float | None = None


class ConvertRequest(BaseModel):
    """Body of POST /convert-html-to-pdf. Field names follow the CLI parameter file."""

    html: str | None = Field(None, description="Inline HTML content; takes precedence over htmlSrc")
    htmlSrc: str | None = Field(None, description="Local path (or http(s) URL) of the HTML source")
    outputPath: str | None = Field(None, description="Where to write the PDF; a unique token is added")
    headerQuery: str | None = Field(None, description="CSS selector of the element used as page header")
    footerQuery: str | None = Field(None, description="CSS selector of the element used as page footer")
    headerTemplate: str | None = Field(None, description="Literal header HTML when no query matches")
    footerTemplate: str | None = Field(None, description="Literal footer HTML when no query matches")
    margin: PageMargin | None = Field(None, description="Page margins, e.g. {\"top\": \"10mm\"}")
    cssPath: str | None = Field(None, description="Extra stylesheet injected before printing")


@app.get("/status", response_class=PlainTextResponse)
def status_check() -> str:
    """Liveness probe."""
    return "Service is up and running."


@app.get("/health")
def health() -> dict[str, str]:
    """Basic health check endpoint."""
    return {"status": "ok"}


@app.post("/convert-html-to-pdf")
async def convert_html_to_pdf(body: ConvertRequest) -> JSONResponse:
    """Convert HTML (inline or from disk) into a PDF written next to ``outputPath``.

    Returns 400 for missing fields or a bad selector, 404 when a referenced
    file is missing and 500 when rendering fails.
    """
    request = ConversionRequest.from_params(body.model_dump(exclude_none=True))
    try:
        result = await SERVICE.convert(request)
    except (MissingParameterError, InvalidSelectorError) as e:
        raise HTTPException(status_code=400, detail=str(e))
    except SourceNotFoundError as e:
        raise HTTPException(status_code=404, detail=f"File not found: {e.path}")
    except RenderError as e:
        raise HTTPException(status_code=500, detail=f"Error generating the PDF: {e}")
    except Exception as e:
        logger.exception("Unexpected failure while converting HTML")
        raise HTTPException(status_code=500, detail=f"Error generating the PDF: {e}")

    return JSONResponse(
        content={
            "message": f"PDF saved to {result.output_path}",
            "outputPath": result.output_path,
        }
    )


def run() -> None:
    """Run the ASGI server using uvicorn.

    Exposes the app at HOST:PORT (default 0.0.0.0:3000). Set RELOAD=true for development.
    """
    import uvicorn

    uvicorn.run("html_pdf_service.webapi:app", host=settings.HOST, port=settings.PORT, reload=settings.RELOAD)


if __name__ == "__main__":
    run()
