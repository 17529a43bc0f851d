"""
Upload Store - CV files on the local filesystem.

Rules:
- Only declared content type application/pdf is accepted (allow-list on the
  header, no content sniffing: a mislabelled file gets through)
- Max file size: 5MB
- Both checks run before anything is written
- Stored name: <epoch millis>-<random><original extension>

Stored files are served as-is under /uploads with no access control and are
never deleted.
"""

import logging
import os
import secrets
import time
from typing import Optional

from fastapi import UploadFile

from app.core.errors import FileRejectedError, UpstreamError

logger = logging.getLogger(__name__)

PDF_MIME_TYPE = "application/pdf"
MAX_FILE_SIZE_MB = 5
MAX_FILE_SIZE_BYTES = MAX_FILE_SIZE_MB * 1024 * 1024
UPLOAD_URL_PREFIX = "/uploads"


def get_file_extension(filename: str) -> str:
    """Get file extension including the dot, case preserved."""
    return os.path.splitext(filename or "")[1]


def generate_filename(original_name: str) -> str:
    """Collision-resistant name: timestamp + random suffix + original extension."""
    unique_suffix = f"{int(time.time() * 1000)}-{secrets.randbelow(10**9)}"
    return unique_suffix + get_file_extension(original_name)


class UploadStore:
    """
    Stores uploaded CVs in a single directory.
    """

    def __init__(
        self,
        directory: str,
        url_prefix: str = UPLOAD_URL_PREFIX,
        max_bytes: int = MAX_FILE_SIZE_BYTES,
    ):
        self.directory = os.path.abspath(directory)
        self.url_prefix = url_prefix.rstrip("/")
        self.max_bytes = max_bytes
        os.makedirs(self.directory, exist_ok=True)

    def store(self, content: bytes, original_name: str, content_type: Optional[str]) -> str:
        """
        Validate and write a file.

        Returns:
            Generated filename (relative to the upload directory)

        Raises:
            FileRejectedError on wrong content type or oversized file
            UpstreamError when the file cannot be written
        """
        if content_type != PDF_MIME_TYPE:
            logger.warning("Rejected upload %r with content type %r", original_name, content_type)
            raise FileRejectedError("Only PDF files are allowed")

        if len(content) > self.max_bytes:
            logger.warning("Rejected upload %r: %d bytes over limit", original_name, len(content))
            raise FileRejectedError(
                f"File too large. Maximum size: {self.max_bytes // (1024 * 1024)}MB"
            )

        filename = generate_filename(original_name)
        path = os.path.join(self.directory, filename)
        try:
            # "xb" refuses to overwrite in the unlikely case of a name collision
            with open(path, "xb") as f:
                f.write(content)
        except OSError:
            logger.exception("Failed to write upload %s", path)
            raise UpstreamError("Failed to store upload")

        logger.info("Stored upload %s (%d bytes)", filename, len(content))
        return filename

    async def save_upload(self, file: UploadFile) -> str:
        """
        Store a FastAPI UploadFile.
        Reads at most max_bytes + 1 bytes of it into memory.
        """
        if file.content_type != PDF_MIME_TYPE:
            # fail before reading the body at all
            return self.store(b"", file.filename or "", file.content_type)

        content = await file.read(self.max_bytes + 1)
        return self.store(content, file.filename or "", file.content_type)

    def public_url(self, filename: Optional[str]) -> Optional[str]:
        """Public path a stored file is served from."""
        if not filename:
            return None
        return f"{self.url_prefix}/{filename}"
