"""Glyph lookup table for a fixed-cell font texture."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass

DEFAULT_FONT_FILE = "Pretendard_Kor.txt"

_DEFAULT_CONFIG = {
    "TEXTURE_WIDTH": 512,
    "TEXTURE_HEIGHT": 512,
    "CELL_WIDTH": 14,
    "CELL_HEIGHT": 32,
    "CELLS_PER_ROW": 36,
    "CELLS_PER_COLUMN": 16,
}

_INTEGER = re.compile(r"[+-]?\d+")
_WCHAR_MASK = 0xFFFF


@dataclass(frozen=True)
class GlyphInfo:
    """Texture coordinates and size of one glyph cell."""

    u: float
    v: float
    width: float
    height: float
    offset_x: float = 0.0
    offset_y: float = 0.0


DEFAULT_GLYPH = GlyphInfo(0.0, 0.0, 0.0, 0.0, 0.0, 0.0)


class _LineReader:
    """Reads whitespace separated words and integers from one line."""

    def __init__(self, line: str) -> None:
        self._line = line
        self._pos = 0
        self.failed = False

    def _skip_space(self) -> None:
        while self._pos < len(self._line) and self._line[self._pos].isspace():
            self._pos += 1

    def word(self) -> str | None:
        if self.failed:
            return None
        self._skip_space()
        start = self._pos
        while self._pos < len(self._line) and not self._line[self._pos].isspace():
            self._pos += 1
        if start == self._pos:
            self.failed = True
            return None
        return self._line[start:self._pos]

    def integer(self) -> int | None:
        if self.failed:
            return None
        self._skip_space()
        match = _INTEGER.match(self._line, self._pos)
        if match is None:
            self.failed = True
            return None
        self._pos = match.end()
        return int(match.group())

    def rewind(self) -> None:
        self._pos = 0
        self.failed = False


def _is_ascii_digit(char: str) -> bool:
    return "0" <= char <= "9"


def _parse(text: str) -> tuple[dict[str, int], list[str]]:
    config = dict(_DEFAULT_CONFIG)
    glyph_chars: list[str] = []

    for line in text.splitlines():
        if not line or line.startswith("#"):
            continue

        reader = _LineReader(line)
        key = reader.word()
        if key is not None:
            if key in config:
                value = reader.integer()
                if value is not None:
                    config[key] = value
                    continue
            if not reader.failed and _is_ascii_digit(key[0]):
                reader.rewind()

        index = reader.integer()
        unicode_value = reader.integer()
        if index is None or unicode_value is None:
            continue

        capacity = config["CELLS_PER_ROW"] * config["CELLS_PER_COLUMN"]
        if 0 <= index < capacity:
            if index >= len(glyph_chars):
                glyph_chars.extend(" " * (index + 1 - len(glyph_chars)))
            glyph_chars[index] = chr(unicode_value & _WCHAR_MASK)

    return config, glyph_chars


class FontAtlas:
    """Maps characters to the cells of a font texture."""

    def __init__(self, glyph_aspect_ratio: float = 1.0, kerning: float = 0.6) -> None:
        self.glyph_aspect_ratio = glyph_aspect_ratio
        self.kerning = kerning
        self._glyphs: dict[str, GlyphInfo] = {}

    @classmethod
    def from_text(cls, text: str) -> "FontAtlas":
        """Build an atlas from the contents of a font description file."""
        config, glyph_chars = _parse(text)
        cell_width = config["CELL_WIDTH"]
        cell_height = config["CELL_HEIGHT"]
        texture_width = config["TEXTURE_WIDTH"]
        texture_height = config["TEXTURE_HEIGHT"]
        per_row = config["CELLS_PER_ROW"]

        atlas = cls(glyph_aspect_ratio=cell_width / cell_height)
        uv_width = cell_width / texture_width
        uv_height = cell_height / texture_height

        for row in range(config["CELLS_PER_COLUMN"]):
            for col in range(per_row):
                index = row * per_row + col
                if index >= len(glyph_chars):
                    break
                atlas.add_glyph(
                    glyph_chars[index],
                    GlyphInfo(
                        u=col * cell_width / texture_width,
                        v=row * cell_height / texture_height,
                        width=uv_width,
                        height=uv_height,
                    ),
                )
        return atlas

    @classmethod
    def load(cls, path: str | os.PathLike[str] = DEFAULT_FONT_FILE) -> "FontAtlas":
        """Read a font description file; raises OSError if it cannot be opened."""
        with open(path, encoding="utf-8") as handle:
            return cls.from_text(handle.read())

    def get_glyph(self, char: str) -> GlyphInfo:
        """Return the glyph for ``char``, or an all-zero glyph if it is unknown."""
        return self._glyphs.get(char, DEFAULT_GLYPH)

    def add_glyph(self, char: str, glyph: GlyphInfo) -> None:
        self._glyphs[char] = glyph

    def __contains__(self, char: object) -> bool:
        return char in self._glyphs

    def __len__(self) -> int:
        return len(self._glyphs)