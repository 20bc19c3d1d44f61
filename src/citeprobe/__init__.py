"""citeprobe — probe AI answer engines and detect brand citations."""

__version__ = "0.1.0"
