"""
Public disk for uploaded images

Files live under STORAGE_ROOT and are served under STORAGE_URL. Rows only
keep the path relative to the disk root (e.g. "banners/3f2c....png").
"""
import logging
import os
import shutil
import uuid
from pathlib import Path
from typing import Optional

from fastapi import UploadFile
from PIL import Image, UnidentifiedImageError

from catalog_admin.config import settings
from catalog_admin.core.exceptions import ValidationFailed

logger = logging.getLogger(__name__)

IMAGE_EXTENSIONS = {".jpg", ".jpeg", ".png", ".gif", ".svg", ".webp"}
SVG_SNIFF_BYTES = 1024


def has_upload(upload: Optional[UploadFile]) -> bool:
    """Browsers send an empty part when a file input is left blank"""
    return upload is not None and bool(upload.filename)


def upload_size(upload: UploadFile) -> int:
    upload.file.seek(0, os.SEEK_END)
    size = upload.file.tell()
    upload.file.seek(0)
    return size


def has_image_content(upload: UploadFile, extension: str) -> bool:
    """
    Look at the bytes of an upload. Pillow must verify raster formats.
    SVG files must contain an <svg> element near the top.
    """
    upload.file.seek(0)
    try:
        if extension == ".svg":
            return b"<svg" in upload.file.read(SVG_SNIFF_BYTES).lower()
        with Image.open(upload.file) as img:
            img.verify()
        return True
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, SyntaxError, ValueError):
        return False
    finally:
        upload.file.seek(0)


def validate_image(upload: Optional[UploadFile], field: str, required: bool = True) -> None:
    """
    Check that an upload is an image no larger than MAX_IMAGE_SIZE_KB.

    Raises:
        ValidationFailed on the given field
    """
    label = field.replace("_", " ")

    if not has_upload(upload):
        if required:
            raise ValidationFailed.single(field, f"The {label} field is required.")
        return

    extension = Path(upload.filename).suffix.lower()
    content_type = (upload.content_type or "").lower()
    if extension not in IMAGE_EXTENSIONS or not content_type.startswith("image/"):
        raise ValidationFailed.single(
            field, f"The {label} must be an image (jpg, jpeg, png, gif, svg, webp)."
        )

    max_kb = settings.MAX_IMAGE_SIZE_KB
    if upload_size(upload) > max_kb * 1024:
        raise ValidationFailed.single(field, f"The {label} may not be greater than {max_kb} kilobytes.")

    if not has_image_content(upload, extension):
        logger.warning("Rejected upload %s on %s, not an image", upload.filename, field)
        raise ValidationFailed.single(field, f"The {label} must be an image.")


class PublicStorage:
    """Local filesystem disk addressed by relative paths"""

    def __init__(self, root: str, base_url: str):
        self.root = Path(root).resolve()
        self.base_url = base_url.rstrip("/")
        self.root.mkdir(parents=True, exist_ok=True)

    def path(self, relative_path: str) -> Path:
        """Absolute path of a stored file, refusing paths that escape the root"""
        full = (self.root / relative_path).resolve()
        if full != self.root and self.root not in full.parents:
            raise ValueError(f"Path outside of storage root: {relative_path}")
        return full

    def store(self, upload: UploadFile, directory: str) -> str:
        """
        Save an upload under directory with a random name.

        Returns:
            Path relative to the disk root
        """
        extension = Path(upload.filename or "").suffix.lower()
        relative_path = f"{directory.strip('/')}/{uuid.uuid4().hex}{extension}"
        target = self.path(relative_path)
        target.parent.mkdir(parents=True, exist_ok=True)

        upload.file.seek(0)
        with open(target, "wb") as out:
            shutil.copyfileobj(upload.file, out)

        logger.info("Stored upload %s as %s", upload.filename, relative_path)
        return relative_path

    def exists(self, relative_path: Optional[str]) -> bool:
        if not relative_path:
            return False
        try:
            return self.path(relative_path).is_file()
        except ValueError:
            return False

    def delete(self, relative_path: Optional[str]) -> bool:
        """Remove a stored file, returns False when there was nothing to remove"""
        if not self.exists(relative_path):
            return False
        self.path(relative_path).unlink()
        logger.info("Deleted stored file %s", relative_path)
        return True

    def url(self, relative_path: Optional[str]) -> Optional[str]:
        if not relative_path:
            return None
        return f"{self.base_url}/{relative_path.lstrip('/')}"


storage = PublicStorage(settings.STORAGE_ROOT, settings.STORAGE_URL)


def get_storage() -> PublicStorage:
    """
    Dependency returning the public disk
    Overridden in tests to point at a temporary directory
    """
    return storage
