"""Pattern Cache — compiled regex patterns keyed by identifier, built once.

Invariants:
    - Every pattern literal is compiled exactly once, in __init__
    - The cache is read-only after construction (MappingProxyType, no setters)
    - A malformed literal raises SchemaError naming the identifier — never a per-record outcome
    - Lookups never compile: get() only reads

Design Decisions:
    - Compile-all in constructor over compile-on-miss: lookups stay lock-free and
      a broken literal fails the schema build, not the first unlucky request
    - Pattern ids over raw literals in rules: a schema reads as intent
      ("alphanumeric_min6"), and one compiled pattern is shared by every rule using it
    - One cache per Schema, not a global table: ids are scoped to the schema that
      declares them, and process-wide reuse comes from the registry holding each
      Schema for the process lifetime
"""

import re
from types import MappingProxyType
from typing import Iterator, Mapping

from fieldguard.core.errors import SchemaError


class PatternCache:
    """Read-only store of compiled patterns."""

    def __init__(self, patterns: Mapping[str, str] | None = None):
        compiled: dict[str, re.Pattern[str]] = {}
        for pattern_id, literal in (patterns or {}).items():
            if not isinstance(pattern_id, str) or not pattern_id.strip():
                raise SchemaError("Pattern identifier must be a non-empty string")
            if not isinstance(literal, str):
                raise SchemaError(
                    f"Pattern '{pattern_id}' must be a string literal, "
                    f"got {type(literal).__name__}",
                )
            try:
                compiled[pattern_id] = re.compile(literal)
            except re.error as e:
                raise SchemaError(
                    f"Pattern '{pattern_id}' is malformed: {e}",
                ) from e
        self._patterns: Mapping[str, re.Pattern[str]] = MappingProxyType(compiled)

    def __contains__(self, pattern_id: object) -> bool:
        return pattern_id in self._patterns

    def __iter__(self) -> Iterator[str]:
        return iter(self._patterns)

    def __len__(self) -> int:
        return len(self._patterns)

    def get(self, pattern_id: str) -> re.Pattern[str]:
        """Return the compiled pattern or raise SchemaError for an unknown id."""
        try:
            return self._patterns[pattern_id]
        except KeyError:
            raise SchemaError(f"Unknown pattern identifier '{pattern_id}'") from None

    def literal(self, pattern_id: str) -> str:
        """Source literal of a compiled pattern (for schema descriptions)."""
        return self.get(pattern_id).pattern
