"""
Unit tests for image MIME detection and data URI encoding.
"""

import base64

import pytest

from html_pdf_service.conversion.images import get_mime_type, image_file_to_data_uri, to_data_uri


class TestGetMimeType:
    @pytest.mark.parametrize(
        "name,expected",
        [
            ("photo.jpg", "image/jpeg"),
            ("photo.jpeg", "image/jpeg"),
            ("PHOTO.JPG", "image/jpeg"),
            ("logo.png", "image/png"),
            ("anim.gif", "image/gif"),
            ("scan.bmp", "image/bmp"),
            ("icon.svg", "image/svg+xml"),
        ],
    )
    def test_known_extensions(self, name, expected):
        assert get_mime_type(name) == expected

    @pytest.mark.parametrize("name", ["image.webp", "noext", "archive.tar.gz"])
    def test_unknown_extension_is_octet_stream(self, name):
        assert get_mime_type(name) == "application/octet-stream"


class TestDataUri:
    def test_to_data_uri(self):
        assert to_data_uri(b"abc", "image/png") == "data:image/png;base64,YWJj"

    def test_image_file_to_data_uri(self, tmp_path):
        path = tmp_path / "dot.gif"
        path.write_bytes(b"GIF89a")
        expected = "data:image/gif;base64," + base64.b64encode(b"GIF89a").decode("ascii")
        assert image_file_to_data_uri(path) == expected

    def test_missing_file_raises_oserror(self, tmp_path):
        with pytest.raises(OSError):
            image_file_to_data_uri(tmp_path / "missing.png")
