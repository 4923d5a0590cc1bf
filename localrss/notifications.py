"""User-facing notices and their message catalog."""

import re

from .logging_config import create_execution_logger

MESSAGES = {
    "en": {
        "updating_feeds": "Updating RSS feeds...",
        "failed_to_fetch_feed": "Failed to fetch feed: %0",
        "unsupported_feed_format": "Unsupported feed format: %0",
        "updated_feed": "Updated feed: %0",
        "error_updating_feed": "Error updating feed: %0",
        "update_completed": "RSS feed update completed",
        "feed_name_required": "Feed name is required",
        "feed_url_required": "Feed URL is required",
        "added_feed": "Added feed: %0",
        "enabled_feed": "Enabled feed: %0",
        "disabled_feed": "Disabled feed: %0",
        "removed_feed": "Removed feed: %0",
        "feed_not_found": "No feed at index %0",
    },
    "ja": {
        "updating_feeds": "RSSフィードを更新中...",
        "failed_to_fetch_feed": "フィードの取得に失敗しました: %0",
        "unsupported_feed_format": "サポートされていないフィード形式です: %0",
        "updated_feed": "フィードを更新しました: %0",
        "error_updating_feed": "フィードの更新中にエラーが発生しました: %0",
        "update_completed": "RSSフィードの更新が完了しました",
        "feed_name_required": "フィード名は必須です",
        "feed_url_required": "フィードURLは必須です",
        "added_feed": "フィードを追加しました: %0",
        "enabled_feed": "フィードを有効にしました: %0",
        "disabled_feed": "フィードを無効にしました: %0",
        "removed_feed": "フィードを削除しました: %0",
        "feed_not_found": "インデックス %0 のフィードはありません",
    },
    "fr": {
        "updating_feeds": "Mise à jour des flux RSS...",
        "failed_to_fetch_feed": "Échec de la récupération du flux: %0",
        "unsupported_feed_format": "Format de flux non supporté: %0",
        "updated_feed": "Flux mis à jour: %0",
        "error_updating_feed": "Erreur lors de la mise à jour du flux: %0",
        "update_completed": "Mise à jour du flux RSS effectuée",
        "feed_name_required": "Nom du flux requis",
        "feed_url_required": "URL du flux requise",
        "added_feed": "Flux ajouté: %0",
        "enabled_feed": "Flux activé: %0",
        "disabled_feed": "Flux désactivé: %0",
        "removed_feed": "Flux supprimé: %0",
        "feed_not_found": "Aucun flux à l'index %0",
    },
}

INSERT_MARKER = re.compile(r"%(\d+)")


def translate(key: str, *inserts: str, language: str = "en") -> str:
    """Look up a message and fill its %0, %1, ... markers."""
    catalog = MESSAGES.get(language) or MESSAGES.get(language.split("-")[0], {})
    message = catalog.get(key) or MESSAGES["en"].get(key, key)

    def _insert(match: re.Match) -> str:
        index = int(match.group(1))
        return inserts[index] if index < len(inserts) else ""

    return INSERT_MARKER.sub(_insert, message)


class Notifier:
    """Receives short user-visible notices."""

    def notify(self, message: str) -> None:
        raise NotImplementedError


class LogNotifier(Notifier):
    """Sends notices to the log."""

    def __init__(self, execution_id: str | None = None):
        self.logger = create_execution_logger("main", execution_id)

    def notify(self, message: str) -> None:
        self.logger.info(f"Notice: {message}", notice=message)
