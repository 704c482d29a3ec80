"""Data types shared by the inspection pipeline."""

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class KeyValuePair:
    """One environment variable or one reported metadata field."""

    key: str
    value: str


@dataclass(frozen=True, slots=True)
class GroupedVariables:
    """Environment variables split into display buckets.

    Attributes:
        singles: Variables with no multi-member prefix group, sorted by key.
        groups: Prefix -> members, in ascending prefix order. Every group
            has at least two members.
    """

    singles: tuple[KeyValuePair, ...] = ()
    groups: dict[str, tuple[KeyValuePair, ...]] = field(default_factory=dict)

    def __len__(self) -> int:
        """Total number of variables across all buckets."""
        return len(self.singles) + sum(len(members) for members in self.groups.values())
