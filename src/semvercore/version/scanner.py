from pathlib import Path
from typing import Iterable, Optional, Union

from .version import Version
from ..constants import ASCII_WHITESPACE, COMMENT_PREFIXES, VERSION_FILE_ENCODING
from ..exceptions import (
    MalformedVersionError,
    MissingInputError,
    NoVersionFoundError,
    UnreadableSourceError,
)


def is_ignorable(line: str) -> bool:
    """Blank lines and lines starting with `#` or `//` precede the version line."""
    stripped = line.lstrip(ASCII_WHITESPACE)
    return not stripped or stripped.startswith(COMMENT_PREFIXES)


def scan_first_version(lines: Optional[Iterable[str]]) -> Version:
    """
    Read lines until the first version specification and parse it.

    The first line that is neither blank nor a comment must be a valid version;
    lines after it are not consumed. The caller owns the line source, and any
    error the source raises while being read propagates unchanged.
    """
    if lines is None:
        raise MissingInputError("Version specification source not defined")
    for line in lines:
        if is_ignorable(line):
            continue
        try:
            return Version.parse(line)
        except MalformedVersionError as e:
            raise MalformedVersionError(
                line.strip(), f"Invalid contents of version holder: '{line.strip()}'"
            ) from e
    raise NoVersionFoundError("Cannot find valid semantic version specification")


def load_version(path: Optional[Union[str, Path]]) -> Version:
    """Load the version held by a text file (see `scan_first_version`)."""
    if path is None:
        raise MissingInputError("Version holder file not specified")
    source = Path(path)
    if not source.is_file():
        raise UnreadableSourceError(source, "not a readable file")
    try:
        stream = source.open("r", encoding=VERSION_FILE_ENCODING)
    except OSError as e:
        raise UnreadableSourceError(source, str(e)) from e
    with stream:
        try:
            return scan_first_version(stream)
        except UnicodeDecodeError as e:
            raise UnreadableSourceError(source, str(e)) from e
