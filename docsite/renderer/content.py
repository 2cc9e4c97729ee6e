"""Helpers for rendering configuration Markdown and highlighted signatures."""

from __future__ import annotations

import typing as typ

from markdown import Markdown
from pygments import highlight
from pygments.formatters.html import HtmlFormatter
from pygments.lexers import get_lexer_by_name
from pygments.util import ClassNotFound

if typ.TYPE_CHECKING:
    from markdown.extensions import Extension
    from pygments.lexer import Lexer

    from docsite.tree.models import Func
else:  # pragma: no cover - type-checking fallback
    Extension = typ.Any

SIGNATURE_CSS_CLASS = "codehilite"
SIGNATURE_LANGUAGE = "typst"


def _signature_lexer() -> Lexer:
    try:
        return get_lexer_by_name(SIGNATURE_LANGUAGE)
    except ClassNotFound:
        return get_lexer_by_name("text")


class ContentRenderer:
    """Turn the site notice and function signatures into HTML fragments.

    Parameters
    ----------
    style : str
        Pygments style for signatures and for :attr:`stylesheet`.
    link_extension : Extension, optional
        Extra Markdown extension, normally the base-path link rewriter.
    """

    def __init__(self, style: str, link_extension: Extension | None = None) -> None:
        self._formatter = HtmlFormatter(style=style, cssclass=SIGNATURE_CSS_CLASS)
        self._lexer = _signature_lexer()
        self._extensions: list[Extension | str] = ["tables", "sane_lists"]
        if link_extension is not None:
            self._extensions.append(link_extension)

    @property
    def stylesheet(self) -> str:
        """CSS rules for the highlighted signature blocks."""
        return self._formatter.get_style_defs(f".{SIGNATURE_CSS_CLASS}")

    def markdown(self, text: str | None) -> str:
        """Convert ``text`` to HTML; blank input gives an empty string."""
        source = (text or "").strip()
        if not source:
            return ""
        return Markdown(extensions=self._extensions, output_format="html").convert(
            source
        )

    def signature(self, func: Func) -> str:
        """Return ``func``'s call signature as a highlighted ``<div>``."""
        html = highlight(format_signature(func), self._lexer, self._formatter)
        return html.replace(
            f'<div class="{SIGNATURE_CSS_CLASS}">',
            f'<div class="{SIGNATURE_CSS_CLASS}" data-language="{SIGNATURE_LANGUAGE}">',
            1,
        )


def format_signature(func: Func) -> str:
    """Format ``func`` as a multi-line call signature.

    Positional-only parameters show their types, named ones ``name: types``,
    and variadic ones a leading ``..``.

    >>> from docsite.tree.models import Func, Param
    >>> func = Func(
    ...     name="pad",
    ...     params=(
    ...         Param("body", types=("content",), positional=True),
    ...         Param("left", types=("length",), named=True),
    ...     ),
    ...     returns=("content",),
    ... )
    >>> print(format_signature(func))
    pad(
      content,
      left: length,
    ) -> content
    """
    if not func.params:
        head = f"{func.name}()"
    else:
        lines = [f"{func.name}("]
        for param in func.params:
            types = " | ".join(param.types) or "any"
            spread = ".." if param.variadic else ""
            if param.positional and not param.named:
                lines.append(f"  {spread}{types},")
            else:
                lines.append(f"  {spread}{param.name}: {types},")
        lines.append(")")
        head = "\n".join(lines)
    if func.returns:
        return f"{head} -> {' | '.join(func.returns)}"
    return head


__all__ = ["ContentRenderer", "format_signature"]
