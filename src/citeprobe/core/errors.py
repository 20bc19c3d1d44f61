"""Error types raised outside the pure detection core."""


class CiteprobeError(Exception):
    """Base class for citeprobe errors."""


class ConfigError(CiteprobeError):
    """Config file is unreadable or fails validation."""


class InputError(CiteprobeError):
    """A response file, option value or responses document is malformed."""
