"""
Errors raised by the wwt store.

Every failure the store can produce is one of the StoreError subclasses
below. Each carries the data it needs to render its own one-line message.
"""


class StoreError(Exception):
    """Base class for all store failures."""


class IoError(StoreError):
    """A filesystem operation on the store file failed."""

    def __init__(self, cause: OSError):
        self.cause = cause
        super().__init__(str(self))

    def __str__(self) -> str:
        if isinstance(self.cause, FileNotFoundError):
            return "File not found"
        return f"IO error: {self.cause}"


class DecodeError(StoreError):
    """The store file is not a JSON object of string pairs."""

    def __init__(self, cause: Exception | str):
        self.cause = cause
        super().__init__(str(self))

    def __str__(self) -> str:
        return f"JSON error: {self.cause}"


class KeyNotFound(StoreError):
    """The named entry does not exist in the store."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(str(self))

    def __str__(self) -> str:
        return f"Key not found: {self.name}"


class ConfigError(StoreError):
    """config.toml could not be read or parsed."""

    def __init__(self, cause: Exception):
        self.cause = cause
        super().__init__(str(self))

    def __str__(self) -> str:
        return f"Config error: {self.cause}"
