"""
Public disk and image validation
"""
import io

import pytest
from fastapi import UploadFile
from starlette.datastructures import Headers

from catalog_admin.core.exceptions import ValidationFailed
from catalog_admin.services.storage_service import validate_image
from conftest import png_bytes

SVG = b'<?xml version="1.0"?>\n<svg xmlns="http://www.w3.org/2000/svg" width="1" height="1"/>'


def _upload(filename="photo.png", content=b"fake-bytes", content_type="image/png") -> UploadFile:
    return UploadFile(
        file=io.BytesIO(content),
        filename=filename,
        headers=Headers({"content-type": content_type})
    )


class TestPublicStorage:

    def test_store_keeps_extension_and_directory(self, storage):
        path = storage.store(_upload("Holiday Photo.JPG", content_type="image/jpeg"), "banners")

        assert path.startswith("banners/")
        assert path.endswith(".jpg")
        assert storage.path(path).read_bytes() == b"fake-bytes"
        assert storage.url(path) == f"/storage/{path}"

    def test_two_uploads_never_share_a_name(self, storage):
        first = storage.store(_upload(), "product-galleries")
        second = storage.store(_upload(), "product-galleries")

        assert first != second

    def test_delete(self, storage):
        path = storage.store(_upload(), "banners")

        assert storage.delete(path) is True
        assert storage.exists(path) is False
        assert storage.delete(path) is False
        assert storage.delete(None) is False

    def test_paths_cannot_escape_the_root(self, storage):
        with pytest.raises(ValueError):
            storage.path("../outside.txt")
        assert storage.exists("../../etc/passwd") is False


class TestValidateImage:

    def test_accepts_images(self):
        validate_image(_upload("logo.svg", SVG, "image/svg+xml"), "image")
        validate_image(_upload("photo.png", png_bytes()), "image")

    def test_checks_the_bytes_not_the_name(self):
        with pytest.raises(ValidationFailed) as exc:
            validate_image(_upload("photo.png", b"#!/bin/sh\nexit 0\n"), "file")
        assert exc.value.errors == {"file": ["The file must be an image."]}

        with pytest.raises(ValidationFailed):
            validate_image(_upload("logo.svg", b"plain text", "image/svg+xml"), "file")

    def test_truncated_png_is_rejected(self):
        with pytest.raises(ValidationFailed):
            validate_image(_upload("photo.png", png_bytes()[:20]), "file")

    def test_upload_is_rewound_after_checks(self):
        upload = _upload("photo.png", png_bytes())

        validate_image(upload, "file")

        assert upload.file.tell() == 0

    def test_missing_upload(self):
        with pytest.raises(ValidationFailed) as exc:
            validate_image(None, "image")
        assert exc.value.errors == {"image": ["The image field is required."]}

        # Optional uploads may be left out
        validate_image(None, "image", required=False)
        validate_image(_upload(filename=""), "image", required=False)

    def test_rejects_wrong_extension_or_type(self):
        with pytest.raises(ValidationFailed):
            validate_image(_upload("report.pdf", content_type="application/pdf"), "file")
        with pytest.raises(ValidationFailed):
            validate_image(_upload("photo.png", content_type="text/plain"), "file")

    def test_rejects_large_files(self, monkeypatch):
        from catalog_admin.config import settings
        monkeypatch.setattr(settings, "MAX_IMAGE_SIZE_KB", 1)

        with pytest.raises(ValidationFailed) as exc:
            validate_image(_upload(content=b"x" * 2048), "file")

        assert exc.value.errors == {"file": ["The file may not be greater than 1 kilobytes."]}
