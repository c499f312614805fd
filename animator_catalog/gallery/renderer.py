"""Render example explanations and Swift snippets into gallery HTML.

Overviews are short Markdown paragraphs; snippets are stored verbatim in the
example definitions and highlighted with Pygments. Every highlighted block is
tagged with ``data-language`` and ``data-lines`` so templates and tests can
identify it without parsing the Pygments markup.
"""

from __future__ import annotations

import re
import textwrap
from html import escape

from markdown import Markdown
from pygments import highlight
from pygments.formatters.html import HtmlFormatter
from pygments.lexers import get_lexer_by_name
from pygments.util import ClassNotFound

FALLBACK_LANGUAGE = "text"
HIGHLIGHT_WRAPPER = re.compile(r'<div class="codehilite">')


class HtmlContentRenderer:
    """Turn example text fields into HTML fragments for the gallery templates."""

    def __init__(self, pygments_style: str = "monokai") -> None:
        self.pygments_style = pygments_style
        self._formatter = HtmlFormatter(style=pygments_style, cssclass="codehilite")
        self._markdown = Markdown(extensions=["sane_lists", "tables"])

    @property
    def stylesheet(self) -> str:
        """Return the Pygments rules scoped to ``.codehilite`` blocks."""
        return self._formatter.get_style_defs(".codehilite")

    def markdown(self, text: str) -> str:
        """Convert an overview paragraph to HTML; blank text yields ``""``."""
        if not text.strip():
            return ""
        self._markdown.reset()
        return self._markdown.convert(text)

    def code_block(self, code: str, language: str | None = None) -> str:
        """Highlight a stored snippet for display in the code viewer.

        Parameters
        ----------
        code : str
            Snippet text. Shared leading indentation and surrounding blank
            lines are removed before highlighting.
        language : str, optional
            Pygments lexer name. Unknown or missing names fall back to plain
            ``text`` and the fallback is what ``data-language`` reports.

        Returns
        -------
        str
            The highlighted ``div.codehilite`` block, or ``""`` when ``code``
            is blank.
        """
        snippet = textwrap.dedent(code).strip("\n")
        if not snippet.strip():
            return ""
        lang = language or FALLBACK_LANGUAGE
        try:
            lexer = get_lexer_by_name(lang)
        except ClassNotFound:
            lang = FALLBACK_LANGUAGE
            lexer = get_lexer_by_name(lang)
        html = highlight(snippet, lexer, self._formatter)
        line_count = snippet.count("\n") + 1
        opening = (
            f'<div class="codehilite" data-language="{escape(lang, quote=True)}" '
            f'data-lines="{line_count}">'
        )
        return HIGHLIGHT_WRAPPER.sub(lambda _: opening, html, count=1)


__all__ = ["HtmlContentRenderer"]
