import logging
import os
from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Iterable, List, Mapping, Optional

from .constants import DEFAULT_OVERRIDE_PARAMETER
from .exceptions import MissingInputError, OverrideError
from .version import Version, is_valid

logger = logging.getLogger(__name__)


class VersionOverrideSource(ABC):
    """
    Provider of a runtime version override, such as project parameters
    or the system environment. Used to let CI pipelines replace the
    version declared by a project.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable description of the source for diagnostics."""

    @abstractmethod
    def is_active(self) -> bool:
        """True when `version_specification()` returns a meaningful value."""

    @abstractmethod
    def version_specification(self) -> Optional[str]:
        """Text that overrides the version, None when the source is not applicable."""

    def __str__(self):
        description = self.name
        if not self.is_active():
            return f"{description} (not active)"
        spec = self.version_specification()
        if spec is None:
            return f"{description} with undefined value"
        return f"{description} with value '{spec}'"


class EnvironmentVersionOverride(VersionOverrideSource):
    """Override taken from an environment variable (useful for CI products)."""

    def __init__(self, env_name: str, environ: Optional[Mapping[str, str]] = None):
        if not env_name or not env_name.strip():
            raise ValueError(f"invalid environment variable name: '{env_name}'")
        self.env_name = env_name
        self._environ = environ

    @property
    def environ(self) -> Mapping[str, str]:
        return os.environ if self._environ is None else self._environ

    @property
    def name(self) -> str:
        return f"environment '{self.env_name}'"

    def is_active(self) -> bool:
        return self.env_name in self.environ

    def version_specification(self) -> Optional[str]:
        return self.environ.get(self.env_name)


class ParameterVersionOverride(VersionOverrideSource):
    """Override taken from named project parameters (e.g. `-P versionOverride=1.2.3`)."""

    def __init__(self, parameters: Mapping[str, Optional[str]], property_name: str = DEFAULT_OVERRIDE_PARAMETER):
        if parameters is None:
            raise MissingInputError("Parameter mapping is undefined")
        if not property_name or not property_name.strip():
            raise ValueError(f"invalid parameter name: '{property_name}'")
        self.parameters = parameters
        self.property_name = property_name

    @property
    def name(self) -> str:
        return f"parameter '{self.property_name}'"

    def is_active(self) -> bool:
        return self.property_name in self.parameters

    def version_specification(self) -> Optional[str]:
        return self.parameters.get(self.property_name)


class VersionOverrideSourceList(Sequence):
    """
    Ordered override sources. The default source is only visible while
    no source has been added explicitly.
    """

    def __init__(self, default_source: Optional[VersionOverrideSource] = None):
        self.default_source = default_source
        self._sources: List[VersionOverrideSource] = []

    def __getitem__(self, index):
        if self._sources:
            return self._sources[index]
        if self.default_source is not None and index in (0, -1):
            return self.default_source
        raise IndexError(f"override source with index {index} does not exist")

    def __len__(self):
        if self._sources:
            return len(self._sources)
        return 1 if self.default_source is not None else 0

    def add(self, source: Optional[VersionOverrideSource]) -> bool:
        if source is None:
            return False
        self._sources.append(source)
        return True

    def clear(self):
        self._sources.clear()
        self.default_source = None


class VersionResolver:
    """
    Resolves the project version, letting the first active override
    source replace the declared specification.
    """

    def __init__(self, sources: Optional[Iterable[VersionOverrideSource]] = None,
                 parameters: Optional[Mapping[str, Optional[str]]] = None,
                 environ: Optional[Mapping[str, str]] = None):
        self.parameters = {} if parameters is None else parameters
        self.environ = environ
        if sources is None:
            self.override_sources = VersionOverrideSourceList(
                ParameterVersionOverride(self.parameters, DEFAULT_OVERRIDE_PARAMETER)
            )
        else:
            self.override_sources = VersionOverrideSourceList()
            for source in sources:
                self.override_sources.add(source)

    def parse(self, specification: Optional[str]) -> Version:
        """Parse `specification` without consulting override sources."""
        return Version.parse(specification)

    def resolve(self, specification: Optional[str]) -> Version:
        override = self.version_override()
        if override is not None:
            return override
        return self.parse(specification)

    # mirrors `project.version = semver.is('1.0.0')` in build scripts
    is_ = resolve

    def allow_override_from_environment(self, env_name: str):
        if env_name is None:
            raise MissingInputError("undefined environment variable name")
        self.override_sources.add(EnvironmentVersionOverride(env_name, self.environ))

    def allow_override_from_parameter(self, property_name: str):
        if property_name is None:
            raise MissingInputError("undefined parameter name")
        self.override_sources.add(ParameterVersionOverride(self.parameters, property_name))

    def version_override(self) -> Optional[Version]:
        source = next((s for s in self.override_sources if s.is_active()), None)
        if source is None:
            logger.debug("No active version override source")
            return None
        spec = source.version_specification()
        if spec is None:
            return None
        if not is_valid(spec):
            raise OverrideError(source)
        logger.info(f"Using project version override: {source}")
        return Version.parse(spec)
