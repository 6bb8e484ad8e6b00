"""
Semver Core

Immutable semantic versions (https://semver.org) with strict parsing,
precedence ordering and copy-on-write identifier operations, plus the
tooling around them: version overrides, production dependency checks,
YAML configuration and a command line interface.

Main modules:
- version: Version value, parser, ordering and version file scanner
- overrides: Environment and parameter based version overrides
- checker: Production grade dependency check
- config: Configuration loading and validation
- utils: Logging setup

Quick start example:
```python
from semvercore import Version, load_version

version = Version.parse("1.4.0-SNAPSHOT")
release = version.strip_pre_release_identifiers()
assert version < release
assert load_version("version.txt").is_stable
```
"""

from .version import (
    Version,
    Ordering,
    parse,
    is_valid,
    compare,
    equals,
    scan_first_version,
    load_version,
)
from .overrides import (
    VersionOverrideSource,
    EnvironmentVersionOverride,
    ParameterVersionOverride,
    VersionResolver,
)
from .checker import Dependency, ProductionDependencyChecker, is_production_grade
from .config import Config, ConfigModel
from .exceptions import (
    SemVerError,
    MissingInputError,
    MalformedVersionError,
    InvalidIdentifierError,
    NoVersionFoundError,
    UnreadableSourceError,
    ConfigurationError,
)

__version__ = "1.0.0"

__all__ = [
    # Version
    '__version__',
    # Core
    'Version',
    'Ordering',
    'parse',
    'is_valid',
    'compare',
    'equals',
    'scan_first_version',
    'load_version',
    # Overrides
    'VersionOverrideSource',
    'EnvironmentVersionOverride',
    'ParameterVersionOverride',
    'VersionResolver',
    # Checker
    'Dependency',
    'ProductionDependencyChecker',
    'is_production_grade',
    # Config
    'Config',
    'ConfigModel',
    # Exceptions
    'SemVerError',
    'MissingInputError',
    'MalformedVersionError',
    'InvalidIdentifierError',
    'NoVersionFoundError',
    'UnreadableSourceError',
    'ConfigurationError',
]
