"""Group environment variables by name prefix.

``GITHUB_SHA`` and ``GITHUB_ACTOR`` share the prefix ``GITHUB`` and end up
in one named section. A prefix owned by a single variable never gets a
section of its own: that variable joins the catch-all bucket instead.
"""

from collections.abc import Iterable

from envscope.inspection.types import GroupedVariables, KeyValuePair

DEFAULT_DELIMITER = "_"


def prefix_of(key: str, delimiter: str = DEFAULT_DELIMITER) -> str | None:
    """Return the part of *key* before the first *delimiter*.

    ``None`` means the key has no delimiter at all. A leading delimiter
    yields the empty prefix.
    """
    head, sep, _ = key.partition(delimiter)
    return head if sep else None


def group_variables(
    pairs: Iterable[KeyValuePair],
    delimiter: str = DEFAULT_DELIMITER,
) -> GroupedVariables:
    """Split *pairs* into single variables and multi-member prefix groups.

    Members of a group keep their input order, so sorted input gives
    alphabetical groups.
    """
    singles: list[KeyValuePair] = []
    by_prefix: dict[str, list[KeyValuePair]] = {}

    for pair in pairs:
        prefix = prefix_of(pair.key, delimiter)
        if prefix is None:
            singles.append(pair)
        else:
            by_prefix.setdefault(prefix, []).append(pair)

    groups: dict[str, tuple[KeyValuePair, ...]] = {}
    for prefix in sorted(by_prefix):
        members = by_prefix[prefix]
        if len(members) > 1:
            groups[prefix] = tuple(members)
        else:
            singles.extend(members)

    singles.sort(key=lambda pair: pair.key)
    return GroupedVariables(singles=tuple(singles), groups=groups)
