"""Rewrite extended regular-expression syntax into parentheses, bars and stars.

The supported extensions are ``.`` (any printable ASCII character), ``+``
after a parenthesised group, ``[abc]`` sets, ``[a-z]`` ranges and ``[^abc]``
complements. A character preceded by a backslash is left alone.
"""

from __future__ import annotations

from collections.abc import Iterable

REGEX_SYMBOLS = frozenset(".|*+[]-^()")
_PRINTABLE = tuple(chr(code) for code in range(32, 127))


def is_regex_symbol(char: str) -> bool:
    """True for the characters that carry meaning in a pattern."""
    return char in REGEX_SYMBOLS


def _escape(char: str) -> str:
    return "\\" + char if is_regex_symbol(char) else char


def _group(alternatives: Iterable[str]) -> str:
    return "(" + "|".join(alternatives) + ")"


def any_char_group() -> str:
    """Alternation of every printable ASCII character, symbols escaped."""
    return _group(_escape(char) for char in _PRINTABLE)


def range_group(first: str, last: str) -> str:
    """Alternation of the characters from ``first`` to ``last`` inclusive."""
    if ord(last) < ord(first):
        raise ValueError(f"empty range {first!r}-{last!r}")
    return _group(chr(code) for code in range(ord(first), ord(last) + 1))


def set_group(chars: str) -> str:
    """Alternation of the characters of ``chars``, taken literally."""
    return _group(chars)


def complement_group(chars: str) -> str:
    """Alternation of the printable characters not in ``chars``, symbols escaped."""
    return _group(_escape(char) for char in _PRINTABLE if char not in chars)


def expand_plus(text: str, index: int) -> tuple[str, int]:
    """Rewrite the ``(group)+`` ending at ``index`` as ``inner(inner)*``.

    Returns the new text and the position just after the rewritten part.
    """
    if not 0 <= index < len(text) or text[index] != "+":
        raise ValueError(f"no '+' at position {index}")
    if index == 0 or text[index - 1] != ")":
        raise ValueError("'+' must follow a parenthesised group")
    depth = 0
    for start in range(index - 1, -1, -1):
        if text[start] == ")":
            depth += 1
        elif text[start] == "(":
            depth -= 1
        if depth == 0:
            break
    else:
        raise ValueError("unbalanced parenthesis before '+'")
    inner = text[start + 1:index - 1]
    replacement = f"{inner}({inner})*"
    return text[:start] + replacement + text[index + 1:], start + len(replacement)


def _at(text: str, index: int) -> str:
    return text[index] if 0 <= index < len(text) else ""


def _bracket(text: str, index: int) -> tuple[str, int]:
    """Return the group for the bracket at ``index`` and the index of its end."""
    if _at(text, index + 1) == "^":
        close = text.find("]", index + 2)
        if close == -1:
            raise ValueError("unterminated '['")
        return complement_group(text[index + 2:close]), close
    if _at(text, index + 2) == "-":
        last = _at(text, index + 3)
        if not last:
            raise ValueError("unterminated range")
        return range_group(text[index + 1], last), index + 4
    close = text.find("]", index + 1)
    if close == -1:
        raise ValueError("unterminated '['")
    return set_group(text[index + 1:close]), close


def translate(pattern: str) -> str:
    """Replace every extended construct of ``pattern`` by its basic form."""
    text = pattern
    i = 0
    while i < len(text):
        char = text[i]
        if i > 0 and text[i - 1] == "\\":
            i += 1
            continue
        if char == ".":
            replacement = any_char_group()
            text = text[:i] + replacement + text[i + 1:]
            i += len(replacement)
        elif char == "+":
            text, i = expand_plus(text, i)
        elif char == "[":
            replacement, end = _bracket(text, i)
            text = text[:i] + replacement + text[end + 1:]
            i += len(replacement)
        else:
            i += 1
    return text