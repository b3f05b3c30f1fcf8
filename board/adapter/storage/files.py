"""File storage backends for uploaded attachments."""

import asyncio
from pathlib import Path
from uuid import uuid4

import logfire

from board.domain.service import FileStorage
from board.util.error import ConfigurationError


def _unique_name(extension: str) -> str:
    return f"{uuid4()}{extension}"


class LocalFileStorage(FileStorage):
    """Writes uploads into a local directory served as static files."""

    def __init__(self, directory: str | Path, url_prefix: str) -> None:
        self.directory = Path(directory)
        self.url_prefix = url_prefix.rstrip("/")

    def ensure_directory(self) -> Path:
        """Create the upload directory if needed.

        Raises:
            ConfigurationError: If the path exists but is not a directory
        """
        if self.directory.exists() and not self.directory.is_dir():
            raise ConfigurationError(
                f"Upload path {self.directory} exists and is not a directory"
            )
        self.directory.mkdir(parents=True, exist_ok=True)
        return self.directory

    async def save(self, content: bytes, extension: str) -> str:
        name = _unique_name(extension)
        target = self.ensure_directory() / name
        await asyncio.to_thread(target.write_bytes, content)
        logfire.info("Upload written", path=str(target), size=len(content))
        return f"{self.url_prefix}/{name}"


class InMemoryFileStorage(FileStorage):
    """Keeps uploads in a dict keyed by URL."""

    def __init__(self, url_prefix: str = "/uploads") -> None:
        self.url_prefix = url_prefix.rstrip("/")
        self.files: dict[str, bytes] = {}

    async def save(self, content: bytes, extension: str) -> str:
        url = f"{self.url_prefix}/{_unique_name(extension)}"
        self.files[url] = content
        return url
