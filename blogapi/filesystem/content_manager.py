"""Content directory scanner."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from blogapi.exceptions import ContentDirectoryError

if TYPE_CHECKING:
    from pathlib import Path


@dataclass(frozen=True)
class ContentFile:
    """A file from the content directory with its listing position (1-based)."""

    position: int
    path: Path

    @property
    def name(self) -> str:
        return self.path.name


def discover_files(content_dir: Path) -> list[Path]:
    """List the regular files directly under *content_dir*, sorted by name.

    Raises ContentDirectoryError if the directory is missing or unreadable.
    """
    if not content_dir.exists():
        raise ContentDirectoryError(f"Content directory does not exist: {content_dir}")
    if not content_dir.is_dir():
        raise ContentDirectoryError(f"Content path exists but is not a directory: {content_dir}")
    try:
        entries = list(content_dir.iterdir())
    except OSError as exc:
        raise ContentDirectoryError(f"Cannot list content directory {content_dir}: {exc}") from exc
    return sorted((entry for entry in entries if entry.is_file()), key=lambda p: p.name)


@dataclass
class ContentManager:
    """Reads post files from a flat content directory."""

    content_dir: Path

    def list_files(self) -> list[ContentFile]:
        """Snapshot the directory listing; positions are fixed at this point."""
        return [
            ContentFile(position=index, path=path)
            for index, path in enumerate(discover_files(self.content_dir), start=1)
        ]

    def read_file(self, content_file: ContentFile) -> str:
        """Read a content file as UTF-8 text."""
        return content_file.path.read_text(encoding="utf-8")
