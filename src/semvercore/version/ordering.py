from enum import IntEnum
from typing import Sequence, TYPE_CHECKING

from .identifiers import is_numeric

if TYPE_CHECKING:
    from .version import Version


class Ordering(IntEnum):
    """
        Result of a precedence comparison
    """
    LESS = -1
    EQUAL = 0
    GREATER = 1


def _sign(a: int, b: int) -> Ordering:
    if a == b:
        return Ordering.EQUAL
    return Ordering.LESS if a < b else Ordering.GREATER


def compare_identifiers(id1: str, id2: str) -> Ordering:
    """
    Compare two pre-release identifiers.

    Numeric identifiers always have lower precedence than non-numeric ones,
    numbers compare as integers and everything else compares by code point.
    """
    id1_numeric = is_numeric(id1)
    id2_numeric = is_numeric(id2)
    if id1_numeric and id2_numeric:
        return _sign(int(id1), int(id2))
    if id1_numeric:
        return Ordering.LESS
    if id2_numeric:
        return Ordering.GREATER
    if id1 == id2:
        return Ordering.EQUAL
    return Ordering.LESS if id1 < id2 else Ordering.GREATER


def compare_identifier_lists(ids1: Sequence[str], ids2: Sequence[str]) -> Ordering:
    """
    Compare two pre-release identifier sequences.

    An empty sequence marks a stable version and wins over any pre-release;
    otherwise the first differing position decides and a strict prefix loses.
    """
    if not ids1:
        return Ordering.EQUAL if not ids2 else Ordering.GREATER
    if not ids2:
        return Ordering.LESS

    for id1, id2 in zip(ids1, ids2):
        cmp = compare_identifiers(id1, id2)
        if cmp != Ordering.EQUAL:
            return cmp
    return _sign(len(ids1), len(ids2))


def compare(a: "Version", b: "Version") -> Ordering:
    """
    Precedence of `a` relative to `b`.

    Build metadata takes no part in precedence, so two versions differing
    only in build metadata compare EQUAL here while `equals` tells them apart.
    """
    for x, y in ((a.major, b.major), (a.minor, b.minor), (a.patch, b.patch)):
        if x != y:
            return _sign(x, y)
    return compare_identifier_lists(a.pre_release_identifiers, b.pre_release_identifiers)


def equals(a: "Version", b: "Version") -> bool:
    """Field-wise equality, build metadata included."""
    return (
        a.major == b.major
        and a.minor == b.minor
        and a.patch == b.patch
        and tuple(a.pre_release_identifiers) == tuple(b.pre_release_identifiers)
        and tuple(a.build_metadata_identifiers) == tuple(b.build_metadata_identifiers)
    )
