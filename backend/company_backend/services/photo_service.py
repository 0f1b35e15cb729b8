"""
Company Backend — Employee Photo Storage Service
=================================================

What:  Validates and stores uploaded employee photos in the photos directory.
How:   The client's file name is reduced to its base name, checked against
       the allowed image extensions and the size limit, then written with
       async file I/O. The returned name is what clients put into
       `PhotoFileName`; the static mount serves it at /Photos/<name>.
Who:   POST /api/employee/savefile.

Storage layout:
    Photos/
    ├── anonymous.png
    ├── jane.jpg
    └── ...

An upload with an existing name replaces the previous file.
"""

import logging
from pathlib import Path, PureWindowsPath
from typing import Optional

import aiofiles

from company_backend.config import settings
from company_backend.exceptions import FileStorageError, ValidationError

logger = logging.getLogger(__name__)

ALLOWED_EXTENSIONS = {".png", ".jpg", ".jpeg", ".gif"}


class PhotoService:
    """
    Manages the photos directory.

    Lifecycle of an upload:
        1. Route reads the multipart `file` → PhotoService.save_photo()
        2. File name reduced to a safe base name
        3. Extension check
        4. Size check
        5. Bytes written to <photos_dir>/<name>
        6. Name returned to the client
    """

    def __init__(self, photos_dir: Optional[str] = None):
        """
        Args:
            photos_dir: Override the configured directory (used in tests).
        """
        self.photos_dir = Path(photos_dir or settings.photos_dir).resolve()
        self.photos_dir.mkdir(parents=True, exist_ok=True)
        logger.info("PhotoService initialized with photos_dir=%s", self.photos_dir)

    def safe_filename(self, filename: Optional[str]) -> str:
        """
        Strip any directory components from a client-supplied file name.

        Browsers on Windows may send full paths ("C:\\fakepath\\jane.jpg"),
        so both separator styles are removed.

        Raises:
            ValidationError if nothing usable remains.
        """
        name = PureWindowsPath(filename or "").name
        name = Path(name).name.strip()
        if not name or name in {".", ".."}:
            raise ValidationError(message="A file name is required", field="file")
        return name

    def validate_extension(self, filename: str) -> str:
        ext = Path(filename).suffix.lower()
        if ext not in ALLOWED_EXTENSIONS:
            raise ValidationError(
                message=(
                    f"File type '{ext}' is not supported. "
                    f"Allowed types: {', '.join(sorted(ALLOWED_EXTENSIONS))}"
                ),
                field="file",
                context={"extension": ext},
            )
        return ext

    def validate_size(self, size: int) -> None:
        if size == 0:
            raise ValidationError(message="The uploaded file is empty", field="file")
        if size > settings.max_photo_size:
            max_mb = settings.max_photo_size / (1024 * 1024)
            raise ValidationError(
                message=f"File size ({size / (1024 * 1024):.1f}MB) exceeds maximum of {max_mb:.0f}MB.",
                field="file",
                context={"actual_size": size, "max_size": settings.max_photo_size},
            )

    async def save_photo(self, filename: Optional[str], content: bytes) -> str:
        """
        Validate and write an uploaded photo.

        Returns:
            The stored file name (no directory part).

        Raises:
            ValidationError: bad name, extension or size (→ 400)
            FileStorageError: the write failed (→ 500)
        """
        name = self.safe_filename(filename)
        self.validate_extension(name)
        self.validate_size(len(content))

        path = self.photos_dir / name
        try:
            async with aiofiles.open(path, "wb") as f:
                await f.write(content)
        except OSError as e:
            logger.error("Failed to store photo at %s: %s", path, str(e))
            raise FileStorageError(
                message="Failed to save uploaded photo.",
                context={"path": str(path), "os_error": str(e)},
            ) from e

        logger.info("Photo stored: %s (%d bytes)", name, len(content))
        return name


photo_service = PhotoService()
