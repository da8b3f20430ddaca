"""Tests for collect_articles.clean_articles.clean module."""

from collect_articles.clean_articles.clean import NO_DESCRIPTION, clean_text, generate_summary


class TestCleanText:
    def test_strips_html_tags(self) -> None:
        assert clean_text("<h1>Title</h1> <p>Body</p>") == "Title Body"

    def test_inline_tags_do_not_split_words(self) -> None:
        assert clean_text("Wa<b>żne</b> wydarzenie") == "Ważne wydarzenie"

    def test_removes_entities(self) -> None:
        assert clean_text("Tom&nbsp;&amp;&#160;Jerry&#x27;s") == "Tom Jerry s"

    def test_leaves_plain_ampersand_alone(self) -> None:
        assert clean_text("AT&T rocks; yes") == "AT&T rocks; yes"

    def test_collapses_whitespace_and_newlines(self) -> None:
        assert clean_text("  multiple   spaces\n\nand\tlines  ") == "multiple spaces and lines"

    def test_no_angle_brackets_remain(self) -> None:
        result = clean_text("a > b <b>bold</b> c < d <i>it</i>")
        assert "<" not in result
        assert ">" not in result
        assert "bold" in result

    def test_none_and_empty_return_empty_string(self) -> None:
        assert clean_text(None) == ""
        assert clean_text("") == ""
        assert clean_text("<br/>") == ""


class TestGenerateSummary:
    def test_takes_first_two_sentences(self) -> None:
        description = "First sentence is long. Second sentence is long! Third sentence is long?"
        assert generate_summary(description) == "First sentence is long. Second sentence is long."

    def test_drops_short_fragments(self) -> None:
        description = "Hi. This is a proper sentence! Ok. Another proper sentence here."
        assert generate_summary(description) == "This is a proper sentence. Another proper sentence here."

    def test_respects_max_sentences(self) -> None:
        description = "First sentence is long. Second sentence is long."
        assert generate_summary(description, max_sentences=1) == "First sentence is long."

    def test_cleans_markup_first(self) -> None:
        description = "<p>Rząd przyjął&nbsp;projekt ustawy.</p><p>Sejm zajmie się nim jutro.</p>"
        assert generate_summary(description) == "Rząd przyjął projekt ustawy. Sejm zajmie się nim jutro."

    def test_single_trailing_period(self) -> None:
        assert generate_summary("A sentence without an ending").endswith("ending.")
        assert not generate_summary("Ends with dots...").endswith("..")

    def test_empty_input_returns_placeholder(self) -> None:
        assert generate_summary(None) == NO_DESCRIPTION
        assert generate_summary("") == NO_DESCRIPTION
        assert NO_DESCRIPTION == "No article description available."

    def test_only_noise_returns_placeholder(self) -> None:
        assert generate_summary("<p>Short.</p>") == NO_DESCRIPTION
