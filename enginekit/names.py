"""Interned, case-insensitively comparable names."""

from __future__ import annotations

from dataclasses import dataclass

from .singleton import Singleton

NAME_SIZE = 256
"""Names of this length or longer cannot be stored and become the none name."""

_HASH_SEED = 5381
_UINT32_MASK = 0xFFFFFFFF


def _terminated(text: str) -> str:
    return text.split("\0", 1)[0]


def hash_string(text: str) -> int:
    """Return the 32-bit djb2 hash of ``text`` (stopping at a NUL character)."""
    value = _HASH_SEED
    for char in _terminated(text):
        value = ((value << 5) + value + ord(char)) & _UINT32_MASK
    return value


def _lower_char(char: str) -> str:
    lowered = char.lower()
    return lowered if len(lowered) == 1 else char


def hash_string_lower(text: str) -> int:
    """Return the djb2 hash of ``text`` with each character lower-cased."""
    return hash_string("".join(_lower_char(char) for char in text))


@dataclass(frozen=True)
class NameEntry:
    """A stored name together with the hash used to compare it."""

    comparison_id: int
    is_wide: bool
    name: str

    @property
    def length(self) -> int:
        return len(self.name)


class NamePool(Singleton):
    """Stores every name by its display hash and by its comparison hash."""

    def __init__(self) -> None:
        self._display: dict[int, NameEntry] = {}
        self._comparison: dict[int, NameEntry] = {}

    def resolve(self, hash_value: int) -> NameEntry:
        """Return the entry stored under a display hash.

        Raises KeyError if no name has that hash.
        """
        try:
            return self._display[hash_value]
        except KeyError:
            raise KeyError(f"no name stored for hash {hash_value}") from None

    def find_or_store(self, text: str) -> int:
        """Store ``text`` if it is new and return its display hash."""
        display_hash = hash_string(text)
        if display_hash in self._display:
            return display_hash

        is_wide = not text.isascii()
        comparison_hash = hash_string_lower(text)
        if comparison_hash not in self._comparison:
            self._comparison[comparison_hash] = NameEntry(0, is_wide, text)

        self._display[display_hash] = NameEntry(comparison_hash, is_wide, text)
        return display_hash

    def __len__(self) -> int:
        return len(self._display)


def get_pool() -> NamePool:
    """Return the shared name pool."""
    return NamePool.get()


class Name:
    """An interned name; equality ignores letter case, display keeps it."""

    __slots__ = ("_display_index", "_comparison_index")

    def __init__(self, text: str | None = None) -> None:
        self._display_index = 0
        self._comparison_index = 0
        if text is None or len(text) >= NAME_SIZE:
            return
        pool = get_pool()
        display = pool.find_or_store(text)
        self._display_index = display
        if display:
            self._comparison_index = pool.resolve(display).comparison_id

    @property
    def display_index(self) -> int:
        return self._display_index

    @property
    def comparison_index(self) -> int:
        return self._comparison_index

    @property
    def is_none(self) -> bool:
        return self._display_index == 0 and self._comparison_index == 0

    def to_string(self) -> str:
        """Return the name as it was first stored, or ``"None"``."""
        if self.is_none:
            return "None"
        return get_pool().resolve(self._display_index).name

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Name):
            return NotImplemented
        return self._comparison_index == other._comparison_index

    def __hash__(self) -> int:
        return hash(self._comparison_index)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Name({self.to_string()!r})"