"""Command line entry point: print one HTML document to PDF from a JSON parameter file."""

import argparse
import asyncio
import json
import logging
from typing import Any, Sequence

from html_pdf_service import settings
from html_pdf_service.conversion import ConversionError, ConversionRequest, ConversionService
from html_pdf_service.factory import build_service
from html_pdf_service.logging_config import configure_logging

logger = logging.getLogger(__name__)


def load_parameters(path: str) -> dict[str, Any]:
    """Read the JSON parameter file (htmlSrc, outputPath, headerQuery, ...)."""
    with open(path, "r", encoding="utf-8") as params_file:
        data = json.load(params_file)
    if not isinstance(data, dict):
        raise ValueError(f"{path} must contain a JSON object")
    return data


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="html-pdf",
        description="Convert an HTML document to PDF using the fields of a JSON parameter file.",
    )
    parser.add_argument("params", help="Path to the JSON parameter file.")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None, service: ConversionService | None = None) -> None:
    args = parse_args(argv)
    configure_logging(settings.LOG_LEVEL, settings.LOGS_DIR, to_files=settings.LOG_TO_FILES)
    logger.info("Processing parameter file %s", args.params)

    try:
        params = load_parameters(args.params)
    except (OSError, ValueError) as exc:
        raise SystemExit(f"Could not read parameter file {args.params}: {exc}") from exc

    request = ConversionRequest.from_params(params)
    try:
        result = asyncio.run((service or build_service()).convert(request))
    except ConversionError as exc:
        raise SystemExit(f"Conversion failed: {exc}") from exc

    print(f"PDF saved to {result.output_path}")


if __name__ == "__main__":
    main()
