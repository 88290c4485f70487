"""Stack exercises: mirrored strings and infix to postfix conversion."""

from __future__ import annotations

_ADDITIVE = "+-"
_MULTIPLICATIVE = "*/"


def is_mirrored(text: str) -> bool:
    """Check that ``text`` has the form ``w c reverse(w)`` with ``w`` over {a, b}.

    Once the second half has emptied the stack, any remaining characters are
    not examined.
    """
    stack: list[str] = []
    reading_first_half = True
    for char in text:
        if reading_first_half:
            if char in "ab":
                stack.append(char)
            elif char == "c":
                reading_first_half = False
            else:
                return False
            continue
        if not stack:
            break
        if stack[-1] != char:
            return False
        stack.pop()
    return not stack


def to_postfix(expression: str) -> str:
    """Convert an infix expression over ASCII letters to postfix notation.

    An incoming operator pops the run of operators of the same class
    (additive or multiplicative) as the one on top of the stack, whatever
    its own class. Characters other than letters, operators and parentheses
    are ignored; an unmatched ``)`` raises ``ValueError``.
    """
    output: list[str] = []
    stack: list[str] = []
    for char in expression:
        if char.isascii() and char.isalpha():
            output.append(char)
        elif char in _ADDITIVE or char in _MULTIPLICATIVE:
            if stack:
                for group in (_ADDITIVE, _MULTIPLICATIVE):
                    if stack[-1] in group:
                        while stack and stack[-1] in group:
                            output.append(stack.pop())
                        break
            stack.append(char)
        elif char == "(":
            stack.append(char)
        elif char == ")":
            while stack and stack[-1] != "(":
                output.append(stack.pop())
            if not stack:
                raise ValueError("unbalanced parenthesis")
            stack.pop()
    output.extend(reversed(stack))
    return "".join(output)