import re
from typing import Any, Dict, Iterable, Optional, Tuple

from .identifiers import validate
from .ordering import compare, equals
from ..constants import SNAPSHOT_ID
from ..exceptions import InvalidIdentifierError, MalformedVersionError, MissingInputError

PRE_RELEASE_KIND = "pre-release ID"
BUILD_METADATA_KIND = "build metadata ID"


def _check_identifier(identifier: Optional[str], kind: str) -> str:
    if identifier is None:
        raise MissingInputError(f"{kind} not specified")
    if not validate(identifier):
        raise InvalidIdentifierError(identifier, kind)
    return identifier


def split_identifiers(raw: Optional[str], text: str = "") -> Tuple[str, ...]:
    """
    Split a dot-joined identifier sequence into validated identifiers.

    Empty pieces (leading, trailing or repeated dots) and pieces that
    are not valid identifiers make the whole `text` malformed.
    """
    if raw is None:
        return ()
    identifiers = raw.split(".")
    for identifier in identifiers:
        if not identifier:
            raise MalformedVersionError(text or raw, f"Empty identifier in '{text or raw}'")
        if not validate(identifier):
            raise MalformedVersionError(text or raw, f"Malformed identifier '{identifier}' in '{text or raw}'")
    return tuple(identifiers)


class Version:
    """
        Immutable semantic version (https://semver.org)

    Equality takes build metadata into account while precedence (<, <=, >, >=)
    ignores it, so `1.2.3 <= 1.2.3+b` holds although `1.2.3 != 1.2.3+b`.
    """
    SEMVER_REGEX = re.compile(
        r"\s*(?P<major>0|[1-9][0-9]*)\."
        r"(?P<minor>0|[1-9][0-9]*)\."
        r"(?P<patch>0|[1-9][0-9]*)"
        r"(?:-(?P<prerelease>[0-9A-Za-z.-]*))?"
        r"(?:\+(?P<build>[0-9A-Za-z.-]*))?"
        r"\s*",
        re.ASCII,
    )

    __slots__ = ("_major", "_minor", "_patch", "_pre_release", "_build_metadata", "_text")

    def __init__(
        self,
        major: int,
        minor: int,
        patch: int,
        pre_release: Iterable[str] = (),
        build_metadata: Iterable[str] = (),
    ):
        for number in (major, minor, patch):
            if isinstance(number, bool) or not isinstance(number, int) or number < 0:
                raise ValueError(f"Version numbers must be non-negative integers, got {number!r}")
        for identifiers in (pre_release, build_metadata):
            if isinstance(identifiers, str):
                raise TypeError(f"Identifiers must be given as a sequence of strings, got {identifiers!r}")
        self._major = major
        self._minor = minor
        self._patch = patch
        self._pre_release = tuple(_check_identifier(i, PRE_RELEASE_KIND) for i in pre_release)
        self._build_metadata = tuple(_check_identifier(i, BUILD_METADATA_KIND) for i in build_metadata)
        self._text = None

    @classmethod
    def parse(cls, text: Optional[str]) -> "Version":
        """
        Parse a version specification such as `1.0.0-rc.1+build.5`.

        Surrounding whitespace is ignored; anything else that does not
        match the grammar raises MalformedVersionError.
        """
        if text is None:
            raise MissingInputError("Semantic version is not specified")
        if not isinstance(text, str):
            raise TypeError(f"Version specification must be a string, got {type(text).__name__}")
        match = cls.SEMVER_REGEX.fullmatch(text)
        if not match:
            raise MalformedVersionError(text)
        parts = match.groupdict()
        version = cls._of(
            int(parts["major"]),
            int(parts["minor"]),
            int(parts["patch"]),
            split_identifiers(parts["prerelease"], text),
            split_identifiers(parts["build"], text),
        )
        return version

    @classmethod
    def _of(cls, major, minor, patch, pre_release: Tuple[str, ...], build_metadata: Tuple[str, ...]) -> "Version":
        # identifiers are already validated by the caller
        version = cls.__new__(cls)
        version._major = major
        version._minor = minor
        version._patch = patch
        version._pre_release = pre_release
        version._build_metadata = build_metadata
        version._text = None
        return version

    # --- Key parts ---
    @property
    def major(self) -> int:
        return self._major

    @property
    def minor(self) -> int:
        return self._minor

    @property
    def patch(self) -> int:
        return self._patch

    @property
    def pre_release_identifiers(self) -> Tuple[str, ...]:
        return self._pre_release

    @property
    def build_metadata_identifiers(self) -> Tuple[str, ...]:
        return self._build_metadata

    @property
    def is_pre_release(self) -> bool:
        """Major version 0 counts as pre-release even without identifiers."""
        return self._major == 0 or bool(self._pre_release)

    @property
    def is_stable(self) -> bool:
        return self._major != 0 and not self._pre_release

    @property
    def is_snapshot(self) -> bool:
        return SNAPSHOT_ID in self._pre_release

    # --- Pre-release identifiers ---
    def has_pre_release_identifier(self, identifier: str) -> bool:
        if identifier is None:
            raise MissingInputError(f"{PRE_RELEASE_KIND} not specified")
        return identifier in self._pre_release

    def with_pre_release_identifier(self, identifier: str) -> "Version":
        _check_identifier(identifier, PRE_RELEASE_KIND)
        if identifier in self._pre_release:
            return self
        return self._of(self._major, self._minor, self._patch, self._pre_release + (identifier,), self._build_metadata)

    def with_optional_pre_release_identifier(self, identifier: Optional[str]) -> "Version":
        if identifier is None:
            return self
        return self.with_pre_release_identifier(identifier)

    def with_pre_release_identifiers(self, *identifiers: Optional[str]) -> "Version":
        extended = _extend(self._pre_release, identifiers, PRE_RELEASE_KIND)
        if extended is self._pre_release:
            return self
        return self._of(self._major, self._minor, self._patch, extended, self._build_metadata)

    def strip_pre_release_identifiers(self) -> "Version":
        return self._of(self._major, self._minor, self._patch, (), self._build_metadata)

    # --- Build metadata identifiers ---
    def has_build_metadata_identifier(self, identifier: str) -> bool:
        if identifier is None:
            raise MissingInputError(f"{BUILD_METADATA_KIND} not specified")
        return identifier in self._build_metadata

    def with_build_metadata_identifier(self, identifier: str) -> "Version":
        _check_identifier(identifier, BUILD_METADATA_KIND)
        if identifier in self._build_metadata:
            return self
        return self._of(self._major, self._minor, self._patch, self._pre_release, self._build_metadata + (identifier,))

    def with_optional_build_metadata_identifier(self, identifier: Optional[str]) -> "Version":
        if identifier is None:
            return self
        return self.with_build_metadata_identifier(identifier)

    def with_build_metadata_identifiers(self, *identifiers: Optional[str]) -> "Version":
        extended = _extend(self._build_metadata, identifiers, BUILD_METADATA_KIND)
        if extended is self._build_metadata:
            return self
        return self._of(self._major, self._minor, self._patch, self._pre_release, extended)

    def strip_build_metadata_identifiers(self) -> "Version":
        return self._of(self._major, self._minor, self._patch, self._pre_release, ())

    def strip_all_identifiers(self) -> "Version":
        return self._of(self._major, self._minor, self._patch, (), ())

    def as_dict(self) -> Dict[str, Any]:
        return {
            "version": str(self),
            "major": self._major,
            "minor": self._minor,
            "patch": self._patch,
            "pre_release": list(self._pre_release),
            "build_metadata": list(self._build_metadata),
            "pre_release_flag": self.is_pre_release,
            "stable": self.is_stable,
            "snapshot": self.is_snapshot,
        }

    def __str__(self):
        # computed on first use; a redundant concurrent computation yields the same text
        text = self._text
        if text is None:
            text = f"{self._major}.{self._minor}.{self._patch}"
            if self._pre_release:
                text += "-" + ".".join(self._pre_release)
            if self._build_metadata:
                text += "+" + ".".join(self._build_metadata)
            self._text = text
        return text

    def __repr__(self):
        return f"Version('{self}')"

    def __eq__(self, other):
        if not isinstance(other, Version):
            return NotImplemented
        return equals(self, other)

    def __hash__(self):
        return hash((self._major, self._minor, self._patch, self._pre_release))

    # rich comparisons follow precedence, so total_ordering (which derives from __eq__) is not used
    def __lt__(self, other):
        if not isinstance(other, Version):
            return NotImplemented
        return compare(self, other) < 0

    def __le__(self, other):
        if not isinstance(other, Version):
            return NotImplemented
        return compare(self, other) <= 0

    def __gt__(self, other):
        if not isinstance(other, Version):
            return NotImplemented
        return compare(self, other) > 0

    def __ge__(self, other):
        if not isinstance(other, Version):
            return NotImplemented
        return compare(self, other) >= 0


def _extend(current: Tuple[str, ...], identifiers: Iterable[Optional[str]], kind: str) -> Tuple[str, ...]:
    """Append new identifiers in order; nothing is returned unless all of them are valid."""
    extended = list(current)
    for identifier in identifiers:
        if identifier is None or identifier in extended:
            continue
        extended.append(_check_identifier(identifier, kind))
    if len(extended) == len(current):
        return current
    return tuple(extended)


def parse(text: Optional[str]) -> Version:
    return Version.parse(text)


def is_valid(text: Optional[str]) -> bool:
    """True when `text` is a well-formed semantic version specification."""
    if not isinstance(text, str):
        return False
    try:
        Version.parse(text)
    except MalformedVersionError:
        return False
    return True
