"""Age-based deletion of previously saved articles.

Dates are read from the front matter keys ``publish_date:`` and ``saved:``.
A template that renames those keys disables the matching retention mode:
publish-date mode then deletes nothing, and saved mode falls back to the
file creation time.
"""

import re
from datetime import datetime, timedelta

from .config import Settings
from .logging_config import create_execution_logger
from .processor import parse_date
from .vault import Vault

PUBLISH_DATE_LINE = re.compile(r"^publish_date: (.*?)$", re.MULTILINE)
SAVED_LINE = re.compile(r"^saved: (.*?)$", re.MULTILINE)


def retention_cutoff(settings: Settings, now: datetime | None = None) -> datetime:
    """Files dated before the returned moment are expired."""
    now = now or datetime.now().astimezone()
    if settings.auto_delete_time_unit == "minutes":
        age = timedelta(minutes=settings.auto_delete_days)
    else:
        age = timedelta(days=settings.auto_delete_days)
    return now - age


class RetentionSweeper:
    """Deletes expired article files from a feed folder."""

    def __init__(self, vault: Vault, settings: Settings, execution_id: str | None = None):
        self.vault = vault
        self.settings = settings
        self.logger = create_execution_logger("retention", execution_id)

    def sweep(self, folder_path: str, now: datetime | None = None) -> int:
        """Delete expired .md files directly inside ``folder_path``.

        Returns:
            Number of files deleted
        """
        cutoff = retention_cutoff(self.settings, now)
        deleted = 0

        try:
            paths = self.vault.list_markdown(folder_path)
        except OSError as e:
            self.logger.error(
                f"Error listing {folder_path}: {e}", file_path=folder_path, error=str(e)
            )
            return 0

        for path in paths:
            try:
                if self._is_expired(path, cutoff):
                    self.vault.delete(path)
                    deleted += 1
                    self.logger.info("Deleted expired article", file_path=path)
            except Exception as e:
                self.logger.error(
                    f"Error processing file: {path}: {e}",
                    exc_info=True,
                    file_path=path,
                    error=str(e),
                )

        self.logger.info(
            f"Retention sweep finished: {deleted} deleted",
            file_path=folder_path,
            files_checked=len(paths),
            files_deleted=deleted,
        )
        return deleted

    def _is_expired(self, path: str, cutoff: datetime) -> bool:
        content = self.vault.read(path)

        if self.settings.auto_delete_based_on == "publish_date":
            match = PUBLISH_DATE_LINE.search(content)
            if not match:
                return False
            published = parse_date(match.group(1).strip())
            if published is None:
                self.logger.warning("Unparsable publish_date", file_path=path)
                return False
            return published < cutoff

        match = SAVED_LINE.search(content)
        if match:
            saved = parse_date(match.group(1).strip())
            if saved is None:
                self.logger.warning("Unparsable saved date", file_path=path)
                return False
            return saved < cutoff

        return self.vault.created_at(path) < cutoff
