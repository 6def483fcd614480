"""Violation Message Formatting — pure template interpolation.

Invariants:
    - Pure function: no IO, never raises on a well-formed template
    - Placeholders resolve from {field} plus the violation params
    - Unknown placeholders are left verbatim ("{foo}") instead of raising KeyError
    - None params render as "none" so one-sided bounds never print "None"
"""

from typing import Any, Mapping


class _KeepMissing(dict):
    def __missing__(self, key: str) -> str:
        return "{" + key + "}"


def _display(value: Any) -> Any:
    return "none" if value is None else value


def render_message(template: str, field: str, params: Mapping[str, Any]) -> str:
    """Interpolate a rule's message template for one violation."""
    values = _KeepMissing({k: _display(v) for k, v in params.items()})
    values.setdefault("field", field)
    try:
        return template.format_map(values)
    except (ValueError, IndexError, AttributeError):
        # Malformed template (stray brace, positional field): show it as written
        return template
