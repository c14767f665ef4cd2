"""
Store module for wwt.

A JSON file holding a single object of name -> description pairs,
mirrored in memory for the lifetime of one process. Every mutation is
flushed to disk immediately by rewriting the whole file.
"""

import logging
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from wwt.errors import DecodeError, IoError, KeyNotFound
from wwt.fuzzy import FuzzyMatcher

logger = logging.getLogger(__name__)

ENTRIES_ADAPTER = TypeAdapter(dict[str, str])


def describe_validation_error(error: ValidationError) -> str:
    """Condense a pydantic error into one line."""
    errors = error.errors(include_url=False)
    first = errors[0]
    loc = ".".join(str(part) for part in first["loc"])
    detail = f"{first['msg']} at '{loc}'" if loc else first["msg"]
    if len(errors) > 1:
        detail += f" (and {len(errors) - 1} more)"
    return detail


class Store:
    """Named things and their descriptions, backed by a JSON file."""

    def __init__(self, path: Path | str, matcher: FuzzyMatcher | None = None):
        self.path = Path(path)
        self.matcher = matcher or FuzzyMatcher()
        self._entries: dict[str, str] = {}
        self._load()

    def _load(self) -> None:
        """Create the file if needed and read it into memory."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            if not self.path.exists():
                self.path.touch()
            raw = self.path.read_bytes()
        except OSError as e:
            raise IoError(e) from e

        if not raw:
            # Fresh store, nothing to parse
            logger.debug("Loaded empty store from %s", self.path)
            self._entries = {}
            return

        try:
            content = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DecodeError(f"invalid UTF-8 at byte {e.start}") from e

        # Strict: no coercion of numbers or bools into descriptions
        try:
            self._entries = ENTRIES_ADAPTER.validate_json(content, strict=True)
        except ValidationError as e:
            raise DecodeError(describe_validation_error(e)) from e

        logger.debug("Loaded %d entries from %s", len(self._entries), self.path)

    def _save(self) -> None:
        """Overwrite the store file with the full mapping."""
        content = ENTRIES_ADAPTER.dump_json(self._entries)
        try:
            self.path.write_bytes(content)
        except OSError as e:
            raise IoError(e) from e

        logger.debug("Saved %d entries to %s", len(self._entries), self.path)

    def set(self, name: str, description: str) -> None:
        """Add or replace an entry and save the store."""
        self._entries[name] = description
        self._save()

    def find(self, query: str) -> list[tuple[str, str]]:
        """
        Find entries whose description fuzzy-matches the query.

        The result is unordered; every match counts equally. The empty
        query returns every entry.
        """
        return [
            (name, description)
            for name, description in self._entries.items()
            if self.matcher.is_match(description, query)
        ]

    def delete(self, name: str) -> None:
        """Remove an entry and save the store. Raises KeyNotFound if absent."""
        if name not in self._entries:
            raise KeyNotFound(name)

        del self._entries[name]
        self._save()
        logger.debug("Deleted %r from %s", name, self.path)

    def get(self, name: str) -> str | None:
        """Get the description for a name."""
        return self._entries.get(name)

    def entries(self) -> dict[str, str]:
        """Get a copy of all entries."""
        return dict(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, name: object) -> bool:
        return name in self._entries
