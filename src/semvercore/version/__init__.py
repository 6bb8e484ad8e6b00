"""
Semantic Version Module

- identifiers: Pre-release and build metadata identifier grammar
- version: Immutable Version value and parser
- ordering: Precedence comparison and equality
- scanner: Locate a version line in a text stream or file

Usage:
    from semvercore.version import Version, parse, compare
"""

from .identifiers import validate, is_numeric
from .ordering import Ordering, compare, equals
from .version import Version, parse, is_valid, split_identifiers
from .scanner import scan_first_version, load_version, is_ignorable

__all__ = [
    'Version',
    'Ordering',
    'parse',
    'is_valid',
    'split_identifiers',
    'validate',
    'is_numeric',
    'compare',
    'equals',
    'scan_first_version',
    'load_version',
    'is_ignorable',
]
