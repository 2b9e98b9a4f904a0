"""Splitting console input into classified tokens."""

from __future__ import annotations

import math
import re
import struct
from dataclasses import dataclass
from enum import Enum, auto

_WHITESPACE = re.compile(r"[ \t\n\v\f\r]+")
_NUMBER = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


class TokenType(Enum):
    WORD = auto()
    NUMBER = auto()
    PATH = auto()


@dataclass(frozen=True)
class Token:
    type: TokenType
    text: str


def is_number(text: str) -> bool:
    """True if the whole text is a finite decimal that fits a 32-bit float."""
    if not _NUMBER.fullmatch(text):
        return False
    value = float(text)
    if not math.isfinite(value):
        return False
    try:
        struct.pack("f", value)
    except OverflowError:
        return False
    return True


def looks_like_path(text: str) -> bool:
    """True if the text holds a path separator or a dot."""
    return "/" in text or "\\" in text or "." in text


class Parser:
    """Whitespace tokenizer that labels each part as a number, path or word."""

    def tokenize(self, text: str) -> list[Token]:
        return [Token(self.classify(part), part) for part in _WHITESPACE.split(text) if part]

    def classify(self, part: str) -> TokenType:
        if is_number(part):
            return TokenType.NUMBER
        if looks_like_path(part):
            return TokenType.PATH
        return TokenType.WORD