"""Plain-text and light Markdown helpers used by the article editor flows.

These are deliberately naive string transforms; they make no attempt at
Markdown correctness or HTML escaping.
"""

import math
import re

EMPTY_PREVIEW = "<p>Nothing to preview yet.</p>"

# Applied in order, while newlines are still intact for the ^ anchors.
_PREVIEW_RULES: list[tuple[re.Pattern[str], str]] = [
    (re.compile(r"\*\*(.*?)\*\*"), r"<strong>\1</strong>"),
    (re.compile(r"\*(.*?)\*"), r"<em>\1</em>"),
    (re.compile(r"(?m)^### (.*?)$"), r"<h3>\1</h3>"),
    (re.compile(r"(?m)^## (.*?)$"), r"<h2>\1</h2>"),
    (re.compile(r"(?m)^# (.*?)$"), r"<h1>\1</h1>"),
    (re.compile(r"(?m)^- (.*?)$"), r"<li>\1</li>"),
]

_PARAGRAPH = re.compile(r"<p>(.*?)</p>")
_TAG = re.compile(r"</?[^>]+(>|$)")


def _break_lines(text: str) -> str:
    return text.replace("\n\n", "</p><p>").replace("\n", "<br />")


def paragraphs_to_html(text: str) -> str:
    """Wrap plain text in paragraphs: blank lines split, single newlines break."""
    return f"<p>{_break_lines(text)}</p>"


def render_markdown_preview(text: str | None) -> str:
    """Render editor text for the live preview pane."""
    if not text:
        return EMPTY_PREVIEW

    rendered = text
    for pattern, replacement in _PREVIEW_RULES:
        rendered = pattern.sub(replacement, rendered)
    return paragraphs_to_html(rendered)


def html_to_editor_text(html: str | None) -> str:
    """Turn stored article HTML back into plain editor text.

    Paragraphs become blank-line separated blocks, ``<br />`` a newline, and
    any other tag is dropped.
    """
    text = _PARAGRAPH.sub(r"\1\n\n", html or "")
    text = text.replace("<br />", "\n")
    return _TAG.sub("", text).strip()


def estimate_read_time(text: str | None) -> str:
    """Label such as ``"2 min read"``: one minute per started 1000 characters."""
    length = len(text) if text else 10
    return f"{math.ceil(length / 1000)} min read"
