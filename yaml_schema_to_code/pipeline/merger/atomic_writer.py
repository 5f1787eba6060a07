"""
Atomic file writer for generated files.

Ensures that an interrupted run never leaves a half-written file behind.
"""

from __future__ import annotations

import tempfile
from pathlib import Path


class AtomicWriter:
    """Writes files through a temporary sibling and an atomic rename.

    1. Write to a temporary file in the same directory
    2. Atomically replace the target file

    Keeping the temporary file in the target directory keeps the rename
    on a single filesystem.
    """

    def write(self, path: Path, content: str) -> None:
        """Write content to file atomically.

        Args:
            path: Target file path
            content: Content to write

        Raises:
            OSError: If file operations fail
        """
        path.parent.mkdir(parents=True, exist_ok=True)

        temp_fd, temp_path_str = tempfile.mkstemp(
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            text=True,
        )
        temp_path = Path(temp_path_str)

        try:
            with open(temp_fd, "w", encoding="utf-8", newline="") as f:
                f.write(content)
            temp_path.replace(path)
        except BaseException:
            temp_path.unlink(missing_ok=True)
            raise

    def write_if_not_exists(self, path: Path, content: str) -> None:
        """Write content only if the file doesn't exist.

        Raises:
            FileExistsError: If the file already exists
        """
        if path.exists():
            raise FileExistsError(f"Output file already exists: {path}. Use force mode to overwrite.")
        self.write(path, content)
