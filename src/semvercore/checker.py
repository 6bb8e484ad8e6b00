import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Mapping, Optional

from .constants import SNAPSHOT_ID
from .exceptions import NonProductionDependencyError
from .version import Version, is_valid

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Dependency:
    """
        Class describe a `group:name:version` dependency coordinate
    """
    group: str
    name: str
    version: Optional[str] = None

    @classmethod
    def parse(cls, coordinate: str) -> "Dependency":
        parts = coordinate.strip().split(":")
        if len(parts) == 2:
            return cls(parts[0], parts[1])
        if len(parts) == 3:
            return cls(parts[0], parts[1], parts[2] or None)
        raise ValueError(f"Dependency coordinate must be 'group:name[:version]', got '{coordinate}'")

    def __str__(self):
        if self.version is None:
            return f"{self.group}:{self.name}"
        return f"{self.group}:{self.name}:{self.version}"


def is_production_grade(version_spec: Optional[str]) -> bool:
    """
    Decide whether a dependency version may be shipped to production.

    Unversioned dependencies are ignored. Semantic versions must be stable;
    anything else is rejected when it looks like `0.x` or a snapshot.
    """
    if version_spec is None:
        return True
    if is_valid(version_spec):
        return Version.parse(version_spec).is_stable
    return not (version_spec.startswith("0.") or SNAPSHOT_ID in version_spec)


class ProductionDependencyChecker:
    """
    Verifies that configured dependencies are production grade.
    """

    def __init__(self, configurations: Mapping[str, Iterable[Dependency]], fail_on_error: bool = True):
        self.configurations = {name: list(deps) for name, deps in configurations.items()}
        self.fail_on_error = fail_on_error

    def check(self) -> Dict[str, List[Dependency]]:
        """
        Check every configuration in order.

        Returns the failing dependencies per configuration, or raises
        NonProductionDependencyError on the first failing configuration
        when `fail_on_error` is set.
        """
        failures: Dict[str, List[Dependency]] = {}
        for cfg_name, dependencies in self.configurations.items():
            invalid = []
            for dependency in dependencies:
                if not is_production_grade(dependency.version):
                    logger.info(f"Checking release status of {dependency} in {cfg_name}: FAIL (version {dependency.version})")
                    invalid.append(dependency)
                else:
                    logger.debug(f"Checking release status of {dependency} in {cfg_name}: OK")
            if not invalid:
                continue
            if self.fail_on_error:
                raise NonProductionDependencyError(cfg_name, invalid, self.error_message(cfg_name, invalid))
            failures[cfg_name] = invalid
        return failures

    @staticmethod
    def error_message(cfg_name: str, dependencies: Iterable[Dependency]) -> str:
        described = []
        for dep in dependencies:
            description = str(dep)
            if dep.version is not None and dep.version not in description:
                description = f"{description} (version {dep.version})"
            described.append(description)
        return f"Non-production grade dependencies detected in {cfg_name}: " + ", ".join(described)
