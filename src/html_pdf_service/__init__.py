"""
HTML to PDF print service package.

This module provides a FastAPI application and a command line entry point
that turn HTML documents into PDF files through headless Chromium.
"""

__all__ = ["__version__"]

__version__ = "0.1.0"
