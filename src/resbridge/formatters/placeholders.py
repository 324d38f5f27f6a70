"""Conversion of printf-style placeholders between canonical and Android syntax.

The canonical form uses ``%@`` for string arguments and prefers unnumbered
placeholders. Android uses ``%s`` and requires positional indices
(``%1$s``) as soon as a string has more than one substitution.

Placeholders are recognized by a small state machine instead of regular
expressions, so that anything that is not clearly a placeholder is kept as
literal text:

    %[index$][flags][width][.precision][length]conversion

``%%`` (a literal percent sign) and ``%n`` (a line separator in Java's
formatter) take no argument and are never placeholders. Java conversions
such as ``%b``, ``%h`` and ``%tY`` are recognized, so ``h`` and ``t`` are
conversions rather than C length modifiers.
"""

from dataclasses import dataclass, replace
from typing import Optional, Union

CANONICAL_STRING = "@"
PLATFORM_STRING = "s"

FLAGS = "-+0#"
DIGITS = "0123456789"
LENGTH_MODIFIERS = "lLqjz"
CONVERSIONS = "@sdiouxXeEfFgGaAcCSpbBhHtT"
NO_ARGUMENT = "%n"

# Scanner states
_TEXT = "text"
_PERCENT = "percent"
_DIGITS = "digits"
_FLAGS = "flags"
_WIDTH = "width"
_PRECISION = "precision"
_LENGTH = "length"


@dataclass(frozen=True)
class Placeholder:
    """A single substitution marker.

    Attributes:
        index: 1-based positional index, or None if unnumbered.
        spec: Flags, width, precision and length modifier, verbatim.
        conversion: The conversion character (``@``, ``s``, ``d``, ...). Empty
            for a numbered marker the scanner could not complete.
    """
    index: Optional[int]
    spec: str
    conversion: str

    @property
    def has_length_modifier(self) -> bool:
        return bool(self.spec) and self.spec[-1] in LENGTH_MODIFIERS

    @property
    def complete(self) -> bool:
        return bool(self.conversion)

    def __str__(self) -> str:
        index = f"{self.index}$" if self.index is not None else ""
        return f"%{index}{self.spec}{self.conversion}"


Token = Union[str, Placeholder]


def tokenize(text: str) -> list[Token]:
    """Split text into literal chunks and placeholders.

    Joining the string forms of the returned tokens always gives back the
    input unchanged.

    Args:
        text: Text that may contain placeholders.

    Returns:
        List of literal strings and Placeholder objects, in order.
    """
    tokens: list[Token] = []
    literal: list[str] = []
    state = _TEXT
    pending = ""  # raw characters of the marker being scanned
    digits = ""
    index: Optional[int] = None
    spec = ""

    i = 0
    while i < len(text):
        c = text[i]

        if state == _TEXT:
            if c == "%":
                state = _PERCENT
                pending = c
                digits = ""
                index = None
                spec = ""
            else:
                literal.append(c)
            i += 1
            continue

        if state == _PERCENT and c in NO_ARGUMENT:
            literal.append("%" + c)
            state = _TEXT
            i += 1
            continue

        next_state = None
        if c in CONVERSIONS:
            if state == _DIGITS:
                spec = digits
            if literal:
                tokens.append("".join(literal))
                literal = []
            tokens.append(Placeholder(index, spec, c))
            state = _TEXT
            i += 1
            continue
        elif state == _PERCENT:
            if c in DIGITS and c != "0":
                digits = c
                next_state = _DIGITS
            elif c in FLAGS:
                spec = c
                next_state = _FLAGS
            elif c == ".":
                spec = c
                next_state = _PRECISION
            elif c in LENGTH_MODIFIERS:
                spec = c
                next_state = _LENGTH
        elif state == _DIGITS:
            if c in DIGITS:
                digits += c
                next_state = _DIGITS
            elif c == "$":
                index = int(digits)
                digits = ""
                next_state = _FLAGS
            elif c == ".":
                spec = digits + c
                next_state = _PRECISION
            elif c in LENGTH_MODIFIERS:
                spec = digits + c
                next_state = _LENGTH
        elif state == _FLAGS:
            if c in FLAGS:
                spec += c
                next_state = _FLAGS
            elif c in DIGITS:
                spec += c
                next_state = _WIDTH
            elif c == ".":
                spec += c
                next_state = _PRECISION
            elif c in LENGTH_MODIFIERS:
                spec += c
                next_state = _LENGTH
        elif state == _WIDTH:
            if c in DIGITS:
                spec += c
                next_state = _WIDTH
            elif c == ".":
                spec += c
                next_state = _PRECISION
            elif c in LENGTH_MODIFIERS:
                spec += c
                next_state = _LENGTH
        elif state == _PRECISION:
            if c in DIGITS:
                spec += c
                next_state = _PRECISION
            elif c in LENGTH_MODIFIERS:
                spec += c
                next_state = _LENGTH
        elif state == _LENGTH:
            if c in LENGTH_MODIFIERS:
                spec += c
                next_state = _LENGTH

        if next_state is None:
            # Not a placeholder after all. Keep what we saw (as an incomplete
            # marker if it was numbered) and rescan the current character.
            _abandon(tokens, literal, pending, index, spec)
            state = _TEXT
            continue

        pending += c
        state = next_state
        i += 1

    if state != _TEXT:
        _abandon(tokens, literal, pending, index, spec)
    if literal:
        tokens.append("".join(literal))
    return tokens


def _abandon(
    tokens: list[Token],
    literal: list[str],
    pending: str,
    index: Optional[int],
    spec: str
) -> None:
    if index is None:
        literal.append(pending)
        return
    if literal:
        tokens.append("".join(literal))
        literal.clear()
    tokens.append(Placeholder(index, spec, ""))


def _join(tokens: list[Token]) -> str:
    return "".join(str(token) for token in tokens)


def _convert_strings(tokens: list[Token], source: str, target: str) -> list[Token]:
    return [
        replace(token, conversion=target)
        if isinstance(token, Placeholder)
        and token.conversion == source
        and not token.has_length_modifier
        else token
        for token in tokens
    ]


def to_canonical(text: str) -> str:
    """Convert Android placeholders to the canonical syntax.

    ``%s`` becomes ``%@``. Positional indices are removed only if they are
    redundant, i.e. every placeholder is numbered and the numbers run
    1, 2, 3, ... from left to right. Any other numbering, or a numbered
    marker that is not a valid placeholder, keeps every index as is.

    Args:
        text: Unescaped Android string.

    Returns:
        Canonical string.
    """
    tokens = _convert_strings(tokenize(text), PLATFORM_STRING, CANONICAL_STRING)

    expected = 1
    for token in tokens:
        if not isinstance(token, Placeholder):
            continue
        if not token.complete or token.index != expected:
            return _join(tokens)
        expected += 1

    if expected > 1:
        tokens = [
            replace(token, index=None) if isinstance(token, Placeholder) else token
            for token in tokens
        ]
    return _join(tokens)


def to_platform(text: str) -> str:
    """Convert canonical placeholders to the Android syntax.

    ``%@`` becomes ``%s``. Strings with two or more unnumbered placeholders
    get positional indices in order of appearance. Strings that already
    use positional indices are not renumbered.

    Args:
        text: Canonical string.

    Returns:
        String with Android placeholders.
    """
    tokens = _convert_strings(tokenize(text), CANONICAL_STRING, PLATFORM_STRING)

    count = 0
    for token in tokens:
        if isinstance(token, Placeholder):
            if token.index is not None:
                return _join(tokens)
            count += 1

    if count <= 1:
        return _join(tokens)

    numbered: list[Token] = []
    current = 1
    for token in tokens:
        if isinstance(token, Placeholder):
            token = replace(token, index=current)
            current += 1
        numbered.append(token)
    return _join(numbered)
