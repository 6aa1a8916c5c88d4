from rich.text import Text

from reftoken.core.grammar import LOCK_GLYPH
from reftoken.core.scanner import TokenScanner
from reftoken.domain.types.tokens import TokenKind
from reftoken.presentation.highlighter import TOKEN_STYLES, ReferenceHighlighter


def test_every_token_kind_has_a_style() -> None:
    assert set(TOKEN_STYLES) == set(TokenKind)


def test_highlight_styles_each_span() -> None:
    text = Text(f"x {{id:ab}} $HOME {{{LOCK_GLYPH}:k1}}")

    ReferenceHighlighter(TokenScanner()).highlight(text)

    assert [(span.start, span.end, span.style) for span in text.spans] == [
        (2, 9, TOKEN_STYLES[TokenKind.ID_REF]),
        (10, 15, TOKEN_STYLES[TokenKind.VARIABLE_REF]),
        (16, 22, TOKEN_STYLES[TokenKind.LOCKED_REF]),
    ]


def test_plain_text_is_left_unstyled() -> None:
    text = Text("nothing to see")

    ReferenceHighlighter(TokenScanner()).highlight(text)

    assert text.spans == []
