"""Configuration management for localrss."""

import json
import os
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any

from .notifications import translate

DEFAULT_TEMPLATE = (
    "---\n"
    "title: {{title}}\n"
    "link: {{link}}\n"
    "author: {{author}}\n"
    "publish_date: {{publishedTime}}\n"
    "saved: {{savedTime}}\n"
    "image: {{image}}\n"
    "tags: {{#tags}}\n"
    "---\n"
    "\n"
    "![image]({{image}})\n"
    "\n"
    "{{content}}"
)

# Settings file keys, as persisted, for each Settings attribute.
SETTINGS_KEYS = {
    "feeds": "feeds",
    "folder_path": "folderPath",
    "template": "template",
    "file_name_template": "fileNameTemplate",
    "update_interval": "updateInterval",
    "last_update_time": "lastUpdateTime",
    "include_images": "includeImages",
    "fetch_image_from_link": "fetchImageFromLink",
    "image_width": "imageWidth",
    "auto_delete_enabled": "autoDeleteEnabled",
    "auto_delete_days": "autoDeleteDays",
    "auto_delete_time_unit": "autoDeleteTimeUnit",
    "auto_delete_based_on": "autoDeleteBasedOn",
    "language": "language",
}


class ConfigError(ValueError):
    """Raised for unreadable settings or invalid feed definitions."""


@dataclass
class FeedConfig:
    """One configured feed."""

    url: str
    name: str
    folder: str = ""
    enabled: bool = True

    @property
    def folder_name(self) -> str:
        """Sub-folder for this feed's articles; the feed name when unset."""
        return self.folder or self.name


@dataclass
class Settings:
    """User settings record."""

    feeds: list[FeedConfig] = field(default_factory=list)
    folder_path: str = "RSS"
    template: str = DEFAULT_TEMPLATE
    file_name_template: str = "{{title}}"
    update_interval: int = 60  # minutes, 0 disables periodic updates
    last_update_time: int = 0  # epoch milliseconds
    include_images: bool = True
    fetch_image_from_link: bool = False
    image_width: str = "50%"
    auto_delete_enabled: bool = False
    auto_delete_days: int = 30
    auto_delete_time_unit: str = "days"  # "days" or "minutes"
    auto_delete_based_on: str = "saved"  # "saved" or "publish_date"
    language: str = "en"

    @property
    def enabled_feeds(self) -> list[FeedConfig]:
        return [feed for feed in self.feeds if feed.enabled]

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Settings":
        """Build settings from persisted data, defaulting missing keys."""
        if not isinstance(data, dict):
            raise ConfigError("Settings must be a JSON object")

        kwargs: dict[str, Any] = {}
        for attr, key in SETTINGS_KEYS.items():
            if key in data:
                kwargs[attr] = data[key]

        kwargs["feeds"] = [_feed_from_dict(feed) for feed in data.get("feeds") or []]
        return cls(**kwargs)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the persisted camelCase layout."""
        values = {f.name: getattr(self, f.name) for f in fields(self)}
        values["feeds"] = [asdict(feed) for feed in self.feeds]
        return {key: values[attr] for attr, key in SETTINGS_KEYS.items()}


def _feed_from_dict(data: Any) -> FeedConfig:
    if not isinstance(data, dict) or "url" not in data:
        raise ConfigError(f"Invalid feed entry: {data!r}")
    return FeedConfig(
        url=str(data["url"]),
        name=str(data.get("name") or data["url"]),
        folder=str(data.get("folder") or ""),
        enabled=bool(data.get("enabled", True)),
    )


class Config:
    """Locates and persists the settings file and the vault root."""

    SETTINGS_FILE = "localrss.json"

    def __init__(self, settings_path: str | None = None, vault_path: str | None = None):
        """Initialize configuration from arguments or environment variables."""
        self.settings_path = Path(
            settings_path or os.getenv("LOCALRSS_SETTINGS", self.SETTINGS_FILE)
        )
        self.vault_path = Path(vault_path or os.getenv("LOCALRSS_VAULT", "."))
        self.log_level = os.getenv("LOG_LEVEL", "INFO")

    def load_settings(self) -> Settings:
        """Read settings; a missing file yields defaults."""
        if not self.settings_path.exists():
            return Settings()

        try:
            with open(self.settings_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in settings file: {e}") from e
        except OSError as e:
            raise ConfigError(f"Error reading settings file: {e}") from e

        return Settings.from_dict(data)

    def save_settings(self, settings: Settings) -> None:
        """Write the full settings record."""
        self.settings_path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.settings_path.with_suffix(self.settings_path.suffix + ".tmp")
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(settings.to_dict(), f, ensure_ascii=False, indent=2)
        tmp_path.replace(self.settings_path)


def add_feed(settings: Settings, name: str, url: str, folder: str = "") -> FeedConfig:
    """Validate and append a new enabled feed."""
    name = name.strip()
    url = url.strip()
    folder = folder.strip()

    if not name:
        raise ConfigError(translate("feed_name_required", language=settings.language))
    if not url:
        raise ConfigError(translate("feed_url_required", language=settings.language))

    feed = FeedConfig(url=url, name=name, folder=folder, enabled=True)
    settings.feeds.append(feed)
    return feed


def _feed_at(settings: Settings, index: int) -> FeedConfig:
    if not 0 <= index < len(settings.feeds):
        raise ConfigError(translate("feed_not_found", str(index), language=settings.language))
    return settings.feeds[index]


def set_feed_enabled(settings: Settings, index: int, enabled: bool) -> FeedConfig:
    """Turn the feed at ``index`` on or off; feeds are identified by position."""
    feed = _feed_at(settings, index)
    feed.enabled = enabled
    return feed


def remove_feed(settings: Settings, index: int) -> FeedConfig:
    """Remove and return the feed at ``index``."""
    _feed_at(settings, index)
    return settings.feeds.pop(index)
