"""Bit flags choosing what the engine draws."""

from __future__ import annotations

from enum import IntFlag

from .singleton import Singleton

_UINT64_MAX = (1 << 64) - 1


class EngineShowFlag(IntFlag):
    PRIMITIVES = 1 << 0
    BILLBOARD_TEXT = 1 << 1


class EngineShowFlags(Singleton):
    """A 64-bit set of show flags, all enabled after initialisation."""

    def __init__(self) -> None:
        self.bits = 0
        self._name_to_flag: dict[str, EngineShowFlag] = {}
        self.initialize()

    @classmethod
    def get(cls) -> "EngineShowFlags":
        """Return the shared instance."""
        return super().get()

    def initialize(self) -> None:
        """Enable every flag and register the flag names."""
        self.bits = _UINT64_MAX
        self._name_to_flag["Primitives"] = EngineShowFlag.PRIMITIVES
        self._name_to_flag["BillboardText"] = EngineShowFlag.BILLBOARD_TEXT

    def get_single_flag(self, flag: EngineShowFlag) -> bool:
        return (self.bits & int(flag)) != 0

    def set_single_flag(self, flag: EngineShowFlag, enabled: bool) -> None:
        if enabled:
            self.bits |= int(flag)
        else:
            self.bits &= ~int(flag) & _UINT64_MAX

    def toggle_single_flag(self, flag: EngineShowFlag) -> None:
        self.bits ^= int(flag)

    def set_flag_by_name(self, flag_name: str, enabled: bool) -> bool:
        """Set the flag called ``flag_name``; False if there is no such flag."""
        flag = self._name_to_flag.get(flag_name)
        if flag is None:
            return False
        self.set_single_flag(flag, enabled)
        return True

    @classmethod
    def find_index_by_name(cls, flag_name: str) -> int:
        """Return the bit value of the named flag on the shared instance, or -1."""
        flag = cls.get()._name_to_flag.get(flag_name)
        return int(flag) if flag is not None else -1