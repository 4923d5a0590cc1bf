"""Unit tests for article file writing."""

from localrss.config import Settings
from localrss.models import Article, WriteOutcome
from localrss.vault import Vault
from localrss.writer import ArticleWriter, format_source_date, short_description


def make_article(**overrides) -> Article:
    values = {
        "title": "Hello World",
        "description": "A short description",
        "content": "<p>Body text</p>",
        "link": "https://example.com/hello",
        "pub_date": "2024-01-02T03:04:05",
        "author": "Alice",
        "categories": ("tech", "news"),
        "image_url": "https://example.com/hello.png",
        "saved_date": "2024-01-03T03:04:05",
    }
    values.update(overrides)
    return Article(**values)


class TestArticleWriter:
    """Tests for ArticleWriter."""

    def setup_method(self):
        self.settings = Settings(image_width="100%")

    def make_writer(self, tmp_path) -> ArticleWriter:
        vault = Vault(tmp_path)
        vault.create_folder("RSS/Feed")
        return ArticleWriter(vault, self.settings)

    def test_writes_default_template(self, tmp_path):
        writer = self.make_writer(tmp_path)

        outcome = writer.write(make_article(), "RSS/Feed")

        assert outcome is WriteOutcome.WRITTEN
        text = (tmp_path / "RSS" / "Feed" / "Hello World.md").read_text(encoding="utf-8")
        assert text.startswith("---\ntitle: Hello World\n")
        assert "link: https://example.com/hello\n" in text
        assert "author: Alice\n" in text
        assert "publish_date: 2024-01-02 03:04:05\n" in text
        assert "saved: 2024-01-03 03:04:05\n" in text
        assert "image: https://example.com/hello.png\n" in text
        assert "tags: #tech #news\n" in text
        assert "![image](https://example.com/hello.png)" in text
        assert text.rstrip().endswith("Body text")

    def test_existing_file_skipped(self, tmp_path):
        writer = self.make_writer(tmp_path)
        path = tmp_path / "RSS" / "Feed" / "Hello World.md"
        path.write_text("original", encoding="utf-8")

        outcome = writer.write(make_article(content="<p>changed</p>"), "RSS/Feed")

        assert outcome is WriteOutcome.SKIPPED
        assert path.read_text(encoding="utf-8") == "original"

    def test_second_write_is_skipped(self, tmp_path):
        writer = self.make_writer(tmp_path)
        assert writer.write(make_article(), "RSS/Feed") is WriteOutcome.WRITTEN
        assert writer.write(make_article(), "RSS/Feed") is WriteOutcome.SKIPPED

    def test_filename_sanitized(self, tmp_path):
        writer = self.make_writer(tmp_path)
        article = make_article(title="My/Title:Is*Weird?")

        assert writer.article_path(article, "RSS/Feed") == "RSS/Feed/My-Title-Is-Weird-.md"
        writer.write(article, "RSS/Feed")
        assert (tmp_path / "RSS" / "Feed" / "My-Title-Is-Weird-.md").exists()

    def test_filename_with_published_date(self, tmp_path):
        self.settings.file_name_template = "{{published}} - {{title}}"
        writer = self.make_writer(tmp_path)

        path = writer.article_path(make_article(), "RSS/Feed")

        assert path == "RSS/Feed/2024-01-02 03-04-05 - Hello World.md"

    def test_unparsable_date_kept_in_filename_and_front_matter(self, tmp_path):
        self.settings.file_name_template = "{{published}} {{title}}"
        writer = self.make_writer(tmp_path)
        article = make_article(pub_date="Someday: soon")

        assert writer.article_path(article, "RSS/Feed") == "RSS/Feed/Someday- soon Hello World.md"
        assert 'publish_date: "Someday: soon"\n' in writer.render(article)

    def test_image_lines_removed_without_image(self, tmp_path):
        writer = self.make_writer(tmp_path)

        text = writer.render(make_article(image_url=""))

        assert "image" not in text
        assert "title: Hello World\n" in text

    def test_yaml_values_escaped(self, tmp_path):
        writer = self.make_writer(tmp_path)

        text = writer.render(make_article(title="Breaking: news, today", author="A & B"))

        assert 'title: "Breaking: news, today"\n' in text
        assert 'author: "A & B"\n' in text

    def test_descriptions(self, tmp_path):
        self.settings.template = "{{description}}|{{descriptionShort}}"
        writer = self.make_writer(tmp_path)
        description = "word " * 20

        text = writer.render(make_article(description=description))

        full, short = text.split("|")
        assert full == description.strip()
        assert short == description.strip()[:50] + "..."

    def test_images_resized(self, tmp_path):
        self.settings.image_width = "50%"
        self.settings.template = "{{content}}"
        writer = self.make_writer(tmp_path)

        text = writer.render(make_article(content='<p><img src="a.png"></p>'))

        assert 'width="50%"' in text

    def test_full_width_leaves_images(self, tmp_path):
        self.settings.template = "{{content}}"
        writer = self.make_writer(tmp_path)

        text = writer.render(make_article(content='<p><img src="a.png" alt="x"></p>'))

        assert "![x](a.png)" in text

    def test_placeholders_in_values_not_expanded(self, tmp_path):
        self.settings.template = "{{title}}\n{{content}}"
        writer = self.make_writer(tmp_path)

        text = writer.render(make_article(title="{{content}}", content="<p>body</p>"))

        assert text.splitlines()[0] == '"{{content}}"'


class TestHelpers:
    """Tests for writer helpers."""

    def test_short_description(self):
        assert short_description("short") == "short"
        assert short_description("a\nb") == "a b"
        assert short_description("x" * 60) == "x" * 50 + "..."
        assert short_description("x" * 50) == "x" * 50

    def test_format_source_date(self):
        assert format_source_date("2024-01-02T03:04:05") == "2024-01-02 03:04:05"

    def test_format_source_date_unparsable_kept_verbatim(self):
        assert format_source_date("2024年1月1日") == "2024年1月1日"
        assert format_source_date("  not \n a date ") == "not a date"

    def test_format_source_date_empty_is_now(self):
        assert len(format_source_date("")) == len("2024-01-02 03:04:05")
