"""Unit tests for the editor content helpers."""

from article_cms.application.services.content_formatter import (
    EMPTY_PREVIEW,
    estimate_read_time,
    html_to_editor_text,
    paragraphs_to_html,
    render_markdown_preview,
)


def test_paragraphs_to_html():
    assert paragraphs_to_html("One\n\nTwo\nlines") == "<p>One</p><p>Two<br />lines</p>"
    assert paragraphs_to_html("Single") == "<p>Single</p>"


def test_preview_of_empty_text():
    assert render_markdown_preview("") == EMPTY_PREVIEW
    assert render_markdown_preview(None) == EMPTY_PREVIEW


def test_preview_inline_emphasis():
    assert render_markdown_preview("**bold** and *soft*") == (
        "<p><strong>bold</strong> and <em>soft</em></p>"
    )


def test_preview_headings_and_list_items():
    rendered = render_markdown_preview("# Title\n## Sub\n- item")
    assert rendered == "<p><h1>Title</h1><br /><h2>Sub</h2><br /><li>item</li></p>"


def test_estimate_read_time():
    assert estimate_read_time(None) == "1 min read"
    assert estimate_read_time("x" * 1000) == "1 min read"
    assert estimate_read_time("x" * 1001) == "2 min read"


def test_html_to_editor_text_undoes_paragraph_html():
    html = paragraphs_to_html("One\n\nTwo\nlines")
    assert html_to_editor_text(html) == "One\n\nTwo\nlines"


def test_html_to_editor_text_strips_other_tags():
    html = "<p>Intro</p><h2>Heading</h2><p>Body with <strong>bold</strong></p>"
    assert html_to_editor_text(html) == "Intro\n\nHeadingBody with bold"
    assert html_to_editor_text(None) == ""
