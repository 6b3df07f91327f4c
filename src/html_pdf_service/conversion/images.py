import base64
from pathlib import Path

MIME_TYPES = {
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".png": "image/png",
    ".gif": "image/gif",
    ".bmp": "image/bmp",
    ".svg": "image/svg+xml",
}
DEFAULT_MIME = "application/octet-stream"


def get_mime_type(path: str | Path) -> str:
    return MIME_TYPES.get(Path(path).suffix.lower(), DEFAULT_MIME)


def to_data_uri(payload: bytes, mime_type: str) -> str:
    encoded = base64.b64encode(payload).decode("ascii")
    return f"data:{mime_type};base64,{encoded}"


def image_file_to_data_uri(path: str | Path) -> str:
    """Read an image from disk and return it as a base64 data URI.

    Blocking; callers on the event loop should offload it to a thread.
    Raises OSError when the file cannot be read (missing, a directory, a
    symlink loop).
    """
    path = Path(path)
    return to_data_uri(path.read_bytes(), get_mime_type(path))
