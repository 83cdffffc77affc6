"""Markup stripping for documentation previews.

Documentation text is markdown. Previews are plain text, so the source is
rendered with the ``markdown`` library and the resulting HTML is reduced to
its text content.
"""

import html
import re

from markdown import markdown

# Block-level tags separate words; inline tags (em, code, a...) do not
_BLOCK_TAG_PATTERN = re.compile(
    r"</?(?:p|h[1-6]|li|ul|ol|pre|blockquote|br|hr|table|thead|tbody|tr|td|th|div)\b[^>]*>",
    re.IGNORECASE,
)
_TAG_PATTERN = re.compile(r"<[^>]+>")


def strip_markup(text: str) -> str:
    """Convert markdown documentation to whitespace-normalized plain text.

    Example:
        >>> strip_markup("Turn a **list** into `Data`.\\n\\n- one\\n- two")
        'Turn a list into Data. one two'
    """
    if not text:
        return ""

    rendered = markdown(text)
    rendered = _BLOCK_TAG_PATTERN.sub(" ", rendered)
    rendered = _TAG_PATTERN.sub("", rendered)
    return " ".join(html.unescape(rendered).split())


def make_preview(text: str, length: int) -> str:
    """Return the first ``length`` characters of the plain-text form of ``text``."""
    if length <= 0:
        return ""
    return strip_markup(text)[:length].rstrip()
