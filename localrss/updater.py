"""Update run orchestration: fetch, parse, save and sweep every enabled feed."""

import threading
import time
from collections.abc import Callable
from datetime import UTC, datetime
from typing import Any

from .config import FeedConfig, Settings
from .fetcher import FeedFetchError, FeedFetcher
from .images import ImageExtractor
from .logging_config import create_execution_logger
from .models import WriteOutcome
from .notifications import LogNotifier, Notifier, translate
from .processor import FeedItemProcessor
from .retention import RetentionSweeper
from .rss import UnsupportedFeedError, parse_feed_document
from .vault import Vault, normalize_path
from .writer import ArticleWriter


def new_metrics() -> dict[str, Any]:
    return {
        "feeds_processed": 0,
        "feeds_failed": 0,
        "articles_found": 0,
        "articles_written": 0,
        "articles_skipped": 0,
        "files_deleted": 0,
        "errors": [],
    }


class UpdateOrchestrator:
    """Runs update passes over the configured feeds, one feed at a time."""

    def __init__(
        self,
        settings: Settings,
        vault: Vault,
        fetcher: FeedFetcher | None = None,
        notifier: Notifier | None = None,
        on_complete: Callable[[Settings], None] | None = None,
    ):
        """Initialize the orchestrator.

        Args:
            settings: Live settings record; re-read at the start of every run
            vault: Storage for article files
            fetcher: HTTP fetcher (a default one is created when omitted)
            notifier: Receiver of user-visible notices
            on_complete: Called with the settings after each finished run,
                typically to persist ``last_update_time``
        """
        self.settings = settings
        self.vault = vault
        self.fetcher = fetcher or FeedFetcher()
        self.notifier = notifier or LogNotifier()
        self.on_complete = on_complete
        self._run_lock = threading.Lock()

    @property
    def running(self) -> bool:
        return self._run_lock.locked()

    def _t(self, key: str, *inserts: str) -> str:
        return translate(key, *inserts, language=self.settings.language)

    def run(self) -> dict[str, Any] | None:
        """Run one update pass.

        Returns:
            Run metrics, or None when another run was already in progress
        """
        if not self._run_lock.acquire(blocking=False):
            create_execution_logger("main").warning("Update already in progress")
            return None

        try:
            return self._run()
        finally:
            self._run_lock.release()

    def _run(self) -> dict[str, Any]:
        execution_id = f"update_{datetime.now(UTC).strftime('%Y%m%d_%H%M%S_%f')}"
        logger = create_execution_logger("main", execution_id)
        settings = self.settings
        metrics = new_metrics()

        enabled_feeds = settings.enabled_feeds
        logger.log_execution_start(feed_count=len(enabled_feeds))
        self.notifier.notify(self._t("updating_feeds"))

        image_extractor = ImageExtractor(self.fetcher, execution_id=execution_id)
        processor = FeedItemProcessor(image_extractor, settings, execution_id=execution_id)
        writer = ArticleWriter(self.vault, settings, execution_id=execution_id)
        sweeper = RetentionSweeper(self.vault, settings, execution_id=execution_id)

        self.vault.create_folder(settings.folder_path)

        for feed in enabled_feeds:
            try:
                logger.info(
                    f"Processing feed: {feed.name}", feed_name=feed.name, feed_url=feed.url
                )
                self._update_feed(feed, processor, writer, sweeper, metrics, logger)
                metrics["feeds_processed"] += 1
                self.notifier.notify(self._t("updated_feed", feed.name))
            except FeedFetchError as e:
                self._record_failure(feed, e, metrics, logger)
                self.notifier.notify(self._t("failed_to_fetch_feed", feed.name))
            except UnsupportedFeedError as e:
                self._record_failure(feed, e, metrics, logger)
                self.notifier.notify(self._t("unsupported_feed_format", feed.name))
            except Exception as e:
                self._record_failure(feed, e, metrics, logger)
                self.notifier.notify(self._t("error_updating_feed", feed.name))

        logger.log_metrics(metrics)
        logger.log_execution_end(success=not metrics["errors"], metrics=metrics)
        self.notifier.notify(self._t("update_completed"))

        settings.last_update_time = int(time.time() * 1000)
        if self.on_complete:
            self.on_complete(settings)

        return metrics

    def _update_feed(
        self,
        feed: FeedConfig,
        processor: FeedItemProcessor,
        writer: ArticleWriter,
        sweeper: RetentionSweeper,
        metrics: dict[str, Any],
        logger,
    ) -> None:
        xml = self.fetcher.fetch(feed.url)
        parsed = parse_feed_document(xml)

        folder_path = normalize_path(f"{self.settings.folder_path}/{feed.folder_name}")
        self.vault.create_folder(folder_path)

        metrics["articles_found"] += len(parsed.items)
        for item in parsed.items:
            if parsed.kind == "rss":
                article = processor.process_rss_item(item, feed)
            else:
                article = processor.process_atom_item(item, parsed.title, feed)

            if writer.write(article, folder_path) is WriteOutcome.WRITTEN:
                metrics["articles_written"] += 1
            else:
                metrics["articles_skipped"] += 1

        logger.log_feed_processing(feed.name, len(parsed.items), feed_kind=parsed.kind)

        if self.settings.auto_delete_enabled:
            metrics["files_deleted"] += sweeper.sweep(folder_path)

    def _record_failure(
        self, feed: FeedConfig, error: Exception, metrics: dict[str, Any], logger
    ) -> None:
        error_msg = f"Failed to update feed {feed.name}: {error}"
        logger.error(
            error_msg, exc_info=True, feed_name=feed.name, feed_url=feed.url, error=str(error)
        )
        metrics["feeds_failed"] += 1
        metrics["errors"].append(error_msg)

    def sweep_all(self) -> int:
        """Run the retention sweep over every enabled feed's folder."""
        sweeper = RetentionSweeper(self.vault, self.settings)
        deleted = 0
        for feed in self.settings.enabled_feeds:
            folder_path = normalize_path(f"{self.settings.folder_path}/{feed.folder_name}")
            deleted += sweeper.sweep(folder_path)
        return deleted
