"""
Rich highlighter that colours reference tokens inside an input line.
"""

from rich.highlighter import Highlighter
from rich.text import Text

from reftoken.core.scanner import TokenScanner
from reftoken.domain.types.tokens import TokenKind

TOKEN_STYLES: dict[TokenKind, str] = {
    TokenKind.ID_REF: "bold #93c5fd on #1e3a8a",
    TokenKind.UUID_REF: "#fde047",
    TokenKind.VAR_REF: "#e879f9",
    TokenKind.VARIABLE_REF: "#4ade80",
    TokenKind.SECURE_INPUT_REF: "#f9a8d4",
    TokenKind.LOCKED_REF: "bold #f87171",
    TokenKind.BADGE_SECURE: "bold #f87171 on #450a0a",
    TokenKind.BADGE_PAGE: "#93c5fd on #172554",
    TokenKind.BADGE_VAR: "#e879f9 on #3b0764",
    TokenKind.BADGE_COMMAND: "#fdba74 on #431407",
}


class ReferenceHighlighter(Highlighter):
    """Applies a style per token kind to every span the scanner finds."""

    def __init__(self, scanner: TokenScanner, styles: dict[TokenKind, str] | None = None) -> None:
        self._scanner = scanner
        self._styles = styles or TOKEN_STYLES

    def highlight(self, text: Text) -> None:
        for span in self._scanner.scan(text.plain):
            style = self._styles.get(span.kind)
            if style:
                text.stylize(style, span.start, span.end)
