"""Persisting articles as Markdown files with front matter."""

from datetime import datetime

from .config import Settings
from .html_utils import html_to_markdown, resize_images
from .logging_config import create_execution_logger
from .models import Article, TemplateData, WriteOutcome
from .processor import parse_date
from .template import format_datetime, prepare_template, render_filename, render_template
from .vault import Vault, normalize_path
from .yaml_format import escape_yaml_value

SHORT_DESCRIPTION_LENGTH = 50
FULL_WIDTH = "100%"


def short_description(description: str) -> str:
    """First 50 characters of the description with "..." when cut."""
    text = description.replace("\r\n", " ").replace("\n", " ").strip()
    if len(text) > SHORT_DESCRIPTION_LENGTH:
        return text[:SHORT_DESCRIPTION_LENGTH] + "..."
    return text


def format_source_date(value: str) -> str:
    """Local ``YYYY-MM-DD HH:mm:ss`` for a source date.

    An unparsable value is returned as-is (whitespace collapsed) so that file
    names built from it stay the same from one run to the next. An empty
    value means the current time.
    """
    if not value or not value.strip():
        return format_datetime(datetime.now())
    parsed = parse_date(value)
    if parsed is None:
        return " ".join(value.split())
    return format_datetime(parsed)


class ArticleWriter:
    """Writes one file per article; an existing file is never touched."""

    def __init__(self, vault: Vault, settings: Settings, execution_id: str | None = None):
        self.vault = vault
        self.settings = settings
        self.logger = create_execution_logger("article_writer", execution_id)

    def article_path(self, article: Article, folder_path: str) -> str:
        """Vault path of the article; this is its de-duplication key."""
        file_name = render_filename(
            self.settings.file_name_template,
            article.title,
            format_source_date(article.pub_date),
        )
        return normalize_path(f"{folder_path}/{file_name}.md")

    def write(self, article: Article, folder_path: str) -> WriteOutcome:
        path = self.article_path(article, folder_path)

        if self.vault.exists(path):
            self.logger.debug(
                "Article already saved", article_title=article.title, file_path=path
            )
            return WriteOutcome.SKIPPED

        try:
            self.vault.create(path, self.render(article))
        except FileExistsError:
            return WriteOutcome.SKIPPED
        self.logger.log_article(article.title, "saved", file_path=path)
        return WriteOutcome.WRITTEN

    def render(self, article: Article) -> str:
        """Render the content template for ``article``."""
        description = article.description.replace("\r\n", " ").replace("\n", " ").strip()

        content = article.content
        width = self.settings.image_width
        if width and width != FULL_WIDTH:
            content = resize_images(content, width)

        template = prepare_template(self.settings.template, bool(article.image_url))

        published_time = format_source_date(article.pub_date)
        if article.pub_date.strip() and parse_date(article.pub_date) is None:
            published_time = escape_yaml_value(published_time)

        return render_template(
            template,
            TemplateData(
                title=escape_yaml_value(article.title),
                link=article.link,
                author=escape_yaml_value(article.author),
                published_time=published_time,
                saved_time=format_source_date(article.saved_date),
                image=article.image_url,
                description=escape_yaml_value(description),
                description_short=escape_yaml_value(short_description(description)),
                tags=" ".join(f"#{category}" for category in article.categories),
                content=html_to_markdown(content),
            ),
        )
