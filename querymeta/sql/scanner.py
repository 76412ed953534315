"""Character-level scanning primitives shared by the extractors.

Identifiers are ASCII only: `[A-Za-z_][A-Za-z0-9_]*`.
"""

from __future__ import annotations

WHITESPACE = " \t\r\n"
QUOTE = "'"


def is_ident_start(c: str) -> bool:
    return ("a" <= c <= "z") or ("A" <= c <= "Z") or c == "_"


def is_ident_char(c: str) -> bool:
    return is_ident_start(c) or is_digit(c)


def is_whitespace(c: str) -> bool:
    return c != "" and c in WHITESPACE


def is_digit(c: str) -> bool:
    return "0" <= c <= "9"


def is_identifier(text: str) -> bool:
    """Whether `text` is exactly one identifier token."""

    return bool(text) and is_ident_start(text[0]) and all(is_ident_char(c) for c in text[1:])


def scan_identifier(text: str, start: int) -> int:
    """Return the end index of the identifier run beginning at `start`."""

    end = start
    while end < len(text) and is_ident_char(text[end]):
        end += 1
    return end


def scan_number(text: str, start: int) -> int:
    """Return the end index of the numeric literal beginning at `start`.

    The literal runs over identifier characters and dots, so `1e5`, `0x1F` and `3.14` are each a
    single token.
    """

    end = start
    while end < len(text) and (is_ident_char(text[end]) or text[end] == "."):
        end += 1
    return end


def trim(text: str) -> str:
    """Strip leading and trailing whitespace."""

    start = 0
    end = len(text)
    while start < end and is_whitespace(text[start]):
        start += 1
    while end > start and is_whitespace(text[end - 1]):
        end -= 1
    return text[start:end]


def skip_string_literal(text: str, start: int) -> int:
    """Return the index just past the single-quoted literal opening at `start`.

    A doubled quote (`''`) inside the literal is an escaped quote. An unterminated literal runs to
    the end of the text.
    """

    i = start + 1
    while i < len(text):
        if text[i] == QUOTE:
            if i + 1 < len(text) and text[i + 1] == QUOTE:
                i += 2
                continue
            return i + 1
        i += 1
    return len(text)


def find_keyword(
        text: str,
        keyword: str,
        start: int = 0,
        *,
        top_level: bool = False,
) -> int | None:
    """Find the first case-insensitive, whole-word occurrence of `keyword`.

    Args:
        text: SQL text to scan.
        keyword: Keyword to look for (e.g. `"FROM"`).
        start: Index to start scanning at. Parenthesis depth is counted from here.
        top_level: Only accept a match at parenthesis depth 0.

    Returns:
        Index of the keyword's first character, or `None` if it does not occur.
    """

    wanted = keyword.upper()
    depth = 0
    i = start
    while i < len(text):
        c = text[i]
        if c == QUOTE:
            i = skip_string_literal(text, i)
            continue
        if c == "(":
            depth += 1
        elif c == ")":
            depth = max(depth - 1, 0)
        elif is_digit(c):
            i = scan_number(text, i)
            continue
        elif is_ident_start(c):
            end = scan_identifier(text, i)
            if (not top_level or depth == 0) and text[i:end].upper() == wanted:
                return i
            i = end
            continue
        i += 1
    return None
