"""A single event's worth of named values."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class DataBlob:
    """Variable name to value mapping for one event."""

    values: dict[str, float] = field(default_factory=dict)

    def find(self, variable: str) -> float | None:
        """Return the value of ``variable``, or None when the event lacks it."""
        return self.values.get(variable)

    def __contains__(self, variable: object) -> bool:
        return variable in self.values

    def __len__(self) -> int:
        return len(self.values)