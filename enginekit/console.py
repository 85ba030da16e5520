"""Debug console: a log of lines, command history and a few commands."""

from __future__ import annotations

from typing import Any, MutableSequence

_LOG_BUFFER_SIZE = 1024

Vec2 = tuple[float, float]


def process_command(command: str, log: MutableSequence[str]) -> None:
    """Run a console command, writing its output to ``log``."""
    log.append("Executing: " + command)
    if command == "clear":
        log.clear()
    elif command == "help":
        log.append("Available commands:")
        log.append("- clear: Clears the console.")
        log.append("- help: Shows this help message.")
    else:
        log.append("Unknown command: " + command)


def resize_to_screen(vec: Vec2, pre_ratio: Vec2, cur_ratio: Vec2) -> Vec2:
    """Rescale a window position or size after the screen ratio changed."""
    cur_min = min(cur_ratio)
    pre_min = min(pre_ratio)
    x, y = vec
    return (
        x * pre_ratio[0] / cur_ratio[0] * cur_min / pre_min,
        y * pre_ratio[1] / cur_ratio[1] * cur_min / pre_min,
    )


class Console:
    """Holds the console log and the history of entered commands."""

    def __init__(self) -> None:
        self.items: list[str] = []
        self.history: list[str] = []
        self.history_pos = -1

    def log(self, fmt: str, *args: Any) -> str:
        """Append a printf-style formatted line, cut to the buffer size."""
        text = (fmt % args) if args else fmt
        text = text[: _LOG_BUFFER_SIZE - 1]
        self.items.append(text)
        return text

    def submit(self, text: str) -> None:
        """Enter a line: echo it, remember it and run it as a command."""
        if not text:
            return
        self.items.append("> " + text)
        self.history.append(text)
        self.history_pos = len(self.history)
        process_command(text, self.items)

    def history_step(self, up: bool) -> str | None:
        """Move through the history and return the entry now selected."""
        if not self.history:
            return None
        self.history_pos += -1 if up else 1
        self.history_pos = max(0, min(self.history_pos, len(self.history) - 1))
        return self.history[self.history_pos]