"""Filesystem abstraction used by the configuration writer.

LocalFileSystem wraps pathlib and shutil. Tests either run it against
tmp_path or substitute a MagicMock satisfying the FileSystem protocol.
"""

from __future__ import annotations

import shutil
from pathlib import Path

ENCODING = "utf-8"


class LocalFileSystem:
    """Production filesystem implementation.

    Satisfies the FileSystem protocol structurally.
    """

    def exists(self, path: Path) -> bool:
        """Check if a path exists."""
        return path.exists()

    def ensure_dir(self, path: Path) -> None:
        """Create a directory and its parents; no-op if it already exists."""
        path.mkdir(parents=True, exist_ok=True)

    def write_text(self, path: Path, content: str) -> None:
        """Write a UTF-8 text file, replacing any existing content."""
        path.write_text(content, encoding=ENCODING)

    def copytree(self, src: Path, dst: Path) -> None:
        """Recursively copy src to dst. dst must not exist."""
        shutil.copytree(src, dst)
