"""Engine building blocks: names, reflected objects, delegates, flags, console, fonts, scenes and debug lines."""

__version__ = "0.1.0"