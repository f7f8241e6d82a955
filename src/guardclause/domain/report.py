"""Violation report: member name -> messages.

Output of the annotation aggregator. Immutable once built.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

GLOBAL_KEY = "Global"
"""Report key for object-level violations not tied to a member."""


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Single violation produced by rule discovery.

    Attributes:
        message: Human-readable message. Empty/blank messages are
            skipped by the aggregator.
        member_names: Members the violation applies to.
            Empty tuple = object-level violation.
    """

    message: str | None
    member_names: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if isinstance(self.member_names, str):
            raise TypeError("member_names must be a tuple of str, not str")


@dataclass(frozen=True, slots=True, eq=False)
class ViolationReport(Mapping[str, tuple[str, ...]]):
    """Violations grouped by subject key.

    Keys are member names or GLOBAL_KEY. Message order within a key
    follows discovery order; key order is not guaranteed.

    Empty report = validation succeeded.

    Attributes:
        entries: Read-only mapping key -> messages.
    """

    entries: Mapping[str, tuple[str, ...]] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        for key, messages in self.entries.items():
            if not key:
                raise ValueError("report key must not be empty")
            if not messages:
                raise ValueError(f"report entry '{key}' must have at least one message")

        # Freeze: caller's dict/lists must not leak mutability into the report
        frozen = {key: tuple(messages) for key, messages in self.entries.items()}
        object.__setattr__(self, "entries", MappingProxyType(frozen))

    @classmethod
    def from_groups(cls, groups: Mapping[str, list[str]]) -> ViolationReport:
        """Build report from mutable grouping lists."""
        return cls(groups)

    def __getitem__(self, key: str) -> tuple[str, ...]:
        return self.entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def is_valid(self) -> bool:
        """True if no violations recorded."""
        return not self.entries

    @property
    def violation_count(self) -> int:
        """Total number of messages across all keys."""
        return sum(len(messages) for messages in self.entries.values())

    @property
    def global_errors(self) -> tuple[str, ...]:
        """Object-level messages (empty tuple if none)."""
        return self.entries.get(GLOBAL_KEY, ())


EMPTY_REPORT = ViolationReport()
