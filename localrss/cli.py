"""Command-line interface for localrss."""

from pathlib import Path

import typer

from .config import Config, ConfigError, add_feed, remove_feed, set_feed_enabled
from .logging_config import create_execution_logger, setup_structured_logging
from .notifications import Notifier, translate
from .scheduler import FeedScheduler
from .updater import UpdateOrchestrator
from .vault import Vault

app = typer.Typer(add_completion=False, help="Save RSS/Atom feed items as Markdown files.")


class EchoNotifier(Notifier):
    """Prints notices to the terminal and logs them."""

    def __init__(self):
        self.logger = create_execution_logger("main")

    def notify(self, message: str) -> None:
        typer.echo(message, err=True)
        self.logger.info(f"Notice: {message}", notice=message)


def _context(settings_path: Path | None, vault_path: Path | None, log_level: str | None):
    config = Config(
        str(settings_path) if settings_path else None,
        str(vault_path) if vault_path else None,
    )
    setup_structured_logging(log_level or config.log_level)
    try:
        settings = config.load_settings()
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    return config, settings


def _orchestrator(config: Config, settings) -> UpdateOrchestrator:
    return UpdateOrchestrator(
        settings,
        Vault(config.vault_path),
        notifier=EchoNotifier(),
        on_complete=config.save_settings,
    )


SettingsOption = typer.Option(
    None, "--settings", "-s", envvar="LOCALRSS_SETTINGS", help="Settings JSON file."
)
VaultOption = typer.Option(
    None, "--vault", "-v", envvar="LOCALRSS_VAULT", help="Root directory for articles."
)
LogLevelOption = typer.Option(None, "--log-level", help="Logging level.")


def _summary(metrics: dict) -> str:
    return (
        f"feeds: {metrics['feeds_processed']} ok, {metrics['feeds_failed']} failed; "
        f"articles: {metrics['articles_written']} written, "
        f"{metrics['articles_skipped']} skipped; "
        f"deleted: {metrics['files_deleted']}"
    )


@app.command()
def update(
    settings_path: Path | None = SettingsOption,
    vault_path: Path | None = VaultOption,
    log_level: str | None = LogLevelOption,
):
    """Update every enabled feed once."""
    config, settings = _context(settings_path, vault_path, log_level)
    metrics = _orchestrator(config, settings).run()
    if metrics is not None:
        typer.echo(_summary(metrics))


@app.command()
def watch(
    settings_path: Path | None = SettingsOption,
    vault_path: Path | None = VaultOption,
    log_level: str | None = LogLevelOption,
):
    """Update now, then keep updating every ``updateInterval`` minutes."""
    config, settings = _context(settings_path, vault_path, log_level)
    orchestrator = _orchestrator(config, settings)

    metrics = orchestrator.run()
    if metrics is not None:
        typer.echo(_summary(metrics))

    if settings.update_interval <= 0:
        return

    scheduler = FeedScheduler(orchestrator.run)
    scheduler.start(settings.update_interval)
    try:
        scheduler.join()
    except KeyboardInterrupt:
        scheduler.stop()


@app.command()
def sweep(
    settings_path: Path | None = SettingsOption,
    vault_path: Path | None = VaultOption,
    log_level: str | None = LogLevelOption,
):
    """Delete expired articles in every enabled feed folder."""
    config, settings = _context(settings_path, vault_path, log_level)
    deleted = _orchestrator(config, settings).sweep_all()
    typer.echo(f"deleted: {deleted}")


@app.command("add-feed")
def add_feed_command(
    name: str = typer.Argument(..., help="Display name of the feed."),
    url: str = typer.Argument(..., help="Feed URL."),
    folder: str = typer.Option("", "--folder", help="Sub-folder; defaults to the name."),
    settings_path: Path | None = SettingsOption,
    log_level: str | None = LogLevelOption,
):
    """Add a feed to the settings file."""
    config, settings = _context(settings_path, None, log_level)
    try:
        feed = add_feed(settings, name, url, folder)
    except ConfigError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1)
    config.save_settings(settings)
    typer.echo(translate("added_feed", feed.name, language=settings.language))


def _change_feed(settings_path: Path | None, log_level: str | None, change, message: str):
    config, settings = _context(settings_path, None, log_level)
    try:
        feed = change(settings)
    except ConfigError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1)
    config.save_settings(settings)
    typer.echo(translate(message, feed.name, language=settings.language))


@app.command("enable-feed")
def enable_feed(
    index: int = typer.Argument(..., help="Feed index as shown by list-feeds."),
    settings_path: Path | None = SettingsOption,
    log_level: str | None = LogLevelOption,
):
    """Include a feed in updates."""
    _change_feed(
        settings_path,
        log_level,
        lambda settings: set_feed_enabled(settings, index, True),
        "enabled_feed",
    )


@app.command("disable-feed")
def disable_feed(
    index: int = typer.Argument(..., help="Feed index as shown by list-feeds."),
    settings_path: Path | None = SettingsOption,
    log_level: str | None = LogLevelOption,
):
    """Keep a feed configured but skip it during updates."""
    _change_feed(
        settings_path,
        log_level,
        lambda settings: set_feed_enabled(settings, index, False),
        "disabled_feed",
    )


@app.command("remove-feed")
def remove_feed_command(
    index: int = typer.Argument(..., help="Feed index as shown by list-feeds."),
    settings_path: Path | None = SettingsOption,
    log_level: str | None = LogLevelOption,
):
    """Delete a feed from the settings file. Saved articles are kept."""
    _change_feed(
        settings_path, log_level, lambda settings: remove_feed(settings, index), "removed_feed"
    )


@app.command("list-feeds")
def list_feeds(
    settings_path: Path | None = SettingsOption,
    log_level: str | None = LogLevelOption,
):
    """Show the configured feeds."""
    _, settings = _context(settings_path, None, log_level)
    for index, feed in enumerate(settings.feeds):
        state = "on " if feed.enabled else "off"
        typer.echo(f"{index}\t{state}\t{feed.name}\t{feed.url}\t{feed.folder_name}")


if __name__ == "__main__":
    app()
