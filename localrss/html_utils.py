"""HTML helpers: plain-text stripping, Markdown conversion, image sizing."""

from bs4 import BeautifulSoup
from markdownify import ATX, MarkdownConverter

UNWANTED_TAGS = ["script", "style"]


class ArticleConverter(MarkdownConverter):
    """Markdown converter that keeps sized images as inline HTML."""

    def convert_img(self, el, text, *args, **kwargs):
        # Markdown image syntax has no width, so sized images stay HTML.
        if el.has_attr("width"):
            return str(el)
        return super().convert_img(el, text, *args, **kwargs)


def strip_html(content: str | None, max_length: int | None = None) -> str:
    """Remove HTML tags from content and normalize whitespace.

    Args:
        content: Raw content that may contain HTML
        max_length: Optional cap; longer text is cut and gets "..." appended

    Returns:
        Clean text content without HTML tags
    """
    if not content:
        return ""

    soup = BeautifulSoup(content, "html.parser")
    for tag in soup(UNWANTED_TAGS):
        tag.decompose()

    text = " ".join(soup.get_text().split())

    if max_length and len(text) > max_length:
        text = text[:max_length] + "..."

    return text


def html_to_markdown(content: str | None) -> str:
    """Convert article HTML to Markdown, dropping script and style blocks."""
    if not content:
        return ""

    soup = BeautifulSoup(content, "html.parser")
    for tag in soup(UNWANTED_TAGS):
        tag.decompose()

    converter = ArticleConverter(heading_style=ATX, bullets="-")
    return converter.convert(str(soup)).strip()


def resize_images(content: str | None, width: str) -> str:
    """Give every <img> without width or style the configured width."""
    if not content:
        return ""

    soup = BeautifulSoup(content, "html.parser")
    for img in soup.find_all("img"):
        if not img.has_attr("width") and not img.has_attr("style"):
            img["width"] = width

    return str(soup)
