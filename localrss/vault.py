"""Local directory storage for article files."""

import os
import re
import unicodedata
from datetime import datetime
from pathlib import Path

SEPARATORS = re.compile(r"[\\/]+")
NON_BREAKING_SPACES = re.compile("[\u00a0\u202f]")


def normalize_path(path: str) -> str:
    """Normalize a vault-relative path.

    Runs of slashes or backslashes collapse to one "/", leading and trailing
    separators are removed, and the text is NFC-normalized.
    """
    path = SEPARATORS.sub("/", path)
    path = NON_BREAKING_SPACES.sub(" ", path)
    path = path.strip("/")
    return unicodedata.normalize("NFC", path)


class Vault:
    """File operations addressed by vault-relative paths."""

    def __init__(self, root: str | Path):
        self.root = Path(root)

    def _resolve(self, path: str) -> Path:
        return self.root / normalize_path(path)

    def exists(self, path: str) -> bool:
        return self._resolve(path).exists()

    def create_folder(self, path: str) -> None:
        """Create a folder and its parents; existing folders are left alone."""
        self._resolve(path).mkdir(parents=True, exist_ok=True)

    def read(self, path: str) -> str:
        return self._resolve(path).read_text(encoding="utf-8")

    def create(self, path: str, content: str) -> None:
        """Create a new file.

        Raises:
            FileExistsError: If a file is already present at ``path``
        """
        with open(self._resolve(path), "x", encoding="utf-8", newline="") as f:
            f.write(content)

    def delete(self, path: str) -> None:
        self._resolve(path).unlink()

    def list_markdown(self, folder: str) -> list[str]:
        """Vault paths of the .md files directly inside ``folder``."""
        directory = self._resolve(folder)
        if not directory.is_dir():
            return []
        prefix = normalize_path(folder)
        return sorted(
            f"{prefix}/{entry.name}"
            for entry in directory.iterdir()
            if entry.is_file() and entry.suffix == ".md"
        )

    def created_at(self, path: str) -> datetime:
        """Creation time where the platform records it, else inode change time."""
        stat = os.stat(self._resolve(path))
        timestamp = getattr(stat, "st_birthtime", None) or stat.st_ctime
        return datetime.fromtimestamp(timestamp).astimezone()
