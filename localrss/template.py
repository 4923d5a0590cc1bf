"""Template rendering for article files and file names."""

import re
from datetime import datetime

from .models import TemplateData

IMAGE_TOKEN = "{{image}}"
IMAGE_LINE = re.compile(r"^.*\{\{image\}\}.*(?:\r?\n)?", re.MULTILINE)
PLACEHOLDER = re.compile(
    r"\{\{(title|link|author|publishedTime|savedTime|image|description"
    r"|descriptionShort|#tags|content)\}\}"
)
FILENAME_PLACEHOLDER = re.compile(r"\{\{(title|published)\}\}")
UNSAFE_FILENAME_CHARS = re.compile(r'[\\/:*?"<>|]')
DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"


def prepare_template(template: str, has_image: bool) -> str:
    """Drop every line that mentions {{image}} when there is no image."""
    if has_image:
        return template
    return IMAGE_LINE.sub("", template)


def render_template(template: str, data: TemplateData) -> str:
    """Substitute the content placeholders in a single pass.

    Substituted values are never re-scanned, so a title that itself
    contains ``{{content}}`` stays literal. Unknown placeholders are kept.
    """
    values = {
        "title": data.title,
        "link": data.link,
        "author": data.author,
        "publishedTime": data.published_time,
        "savedTime": data.saved_time,
        "image": data.image,
        "description": data.description,
        "descriptionShort": data.description_short,
        "#tags": data.tags,
        "content": data.content,
    }
    return PLACEHOLDER.sub(lambda match: values[match.group(1)], template)


def render_filename(template: str, title: str, published: str) -> str:
    """Render the file name template and replace path-unsafe characters."""
    values = {"title": title, "published": published}
    name = FILENAME_PLACEHOLDER.sub(lambda match: values[match.group(1)], template)
    return sanitize_filename(name)


def sanitize_filename(name: str) -> str:
    r"""Replace each of \ / : * ? " < > | with "-"."""
    return UNSAFE_FILENAME_CHARS.sub("-", name)


def format_datetime(value: datetime) -> str:
    """Format as ``YYYY-MM-DD HH:mm:ss`` in local time."""
    if value.tzinfo is not None:
        value = value.astimezone()
    return value.strftime(DATETIME_FORMAT)
