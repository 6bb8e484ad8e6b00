import yaml
import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator, ConfigDict

from .checker import Dependency, ProductionDependencyChecker
from .exceptions import ConfigFileMissingError, ConfigParsingError, ConfigValidationError
from .overrides import EnvironmentVersionOverride, ParameterVersionOverride, VersionOverrideSource, VersionResolver
from .version import Version, is_valid, load_version

logger = logging.getLogger(__name__)


class OverrideModel(BaseModel):
    """
        Class Config-Validation Model describe one entry of `overrides`
    """
    env: Optional[str] = None
    parameter: Optional[str] = None
    model_config = ConfigDict(extra="forbid")

    @model_validator(mode='after')
    def check_single_source(self) -> 'OverrideModel':
        """Exactly one of env/parameter, non-blank"""
        given = [value for value in (self.env, self.parameter) if value is not None]
        if len(given) != 1:
            raise ValueError("An override must define exactly one of 'env' or 'parameter'.")
        if not given[0].strip():
            raise ValueError("Override source name cannot be blank.")
        return self


class ChecksModel(BaseModel):
    """
        Class Config-Validation Model describe `checks`
    """
    fail_on_error: bool = True
    configurations: Dict[str, List[str]] = Field(default_factory=dict)

    @field_validator('configurations')
    @classmethod
    def check_coordinates(cls, value: Dict[str, List[str]]) -> Dict[str, List[str]]:
        for cfg_name, coordinates in value.items():
            for coordinate in coordinates:
                if len(coordinate.split(":")) not in (2, 3):
                    raise ValueError(f"Invalid dependency '{coordinate}' in configuration '{cfg_name}'.")
        return value


class ConfigModel(BaseModel):
    """
        Class Config-Validation Model desribe top-level of config
    """
    version: Optional[str] = None
    version_file: Optional[str] = None
    overrides: Optional[List[OverrideModel]] = None
    checks: ChecksModel = Field(default_factory=ChecksModel)
    model_config = ConfigDict(extra="forbid")

    @model_validator(mode='after')
    def check_version_declaration(self) -> 'ConfigModel':
        """Exactly one of version/version_file, and version must be well-formed"""
        if (self.version is None) == (self.version_file is None):
            raise ValueError("Config must define exactly one of 'version' or 'version_file'.")
        if self.version is not None and not is_valid(self.version):
            raise ValueError(f"Invalid semantic version specification: '{self.version}'")
        return self


class Config:
    """
    Loads and validates the semver.yml file using Pydantic models.
    """
    def __init__(self, config_path: str | Path):
        self.path = Path(config_path)
        logger.info(f"Loading configuration from '{self.path}'...")
        raw_data = self._load_raw_config()

        logger.debug("Validating configuration structure with Pydantic...")
        try:
            self.model = ConfigModel.model_validate(raw_data)
        except ValidationError as e:
            raise ConfigValidationError(f"Configuration validation failed:\n{e}")
        logger.debug(f"Configuration model validated successfully: \n{self.model.model_dump_json(indent=2)}")

    def _load_raw_config(self) -> Dict[str, Any]:
        try:
            content = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            raise ConfigFileMissingError(f"Configuration file not found at: {self.path}")
        try:
            config_data = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigParsingError(f"Error parsing YAML file: {e}")
        if not isinstance(config_data, dict):
            raise ConfigParsingError("Configuration file must be a YAML document containing a dictionary.")
        logger.debug(f"Successfully parsed YAML from '{self.path}'.")
        return config_data

    @property
    def version_spec(self) -> Optional[str]:
        return self.model.version

    @property
    def version_file(self) -> Optional[Path]:
        """Version holder path, relative paths taken from the config directory"""
        if self.model.version_file is None:
            return None
        path = Path(self.model.version_file)
        return path if path.is_absolute() else self.path.parent / path

    def override_sources(self, parameters: Mapping[str, Optional[str]],
                         environ: Optional[Mapping[str, str]] = None) -> Optional[List[VersionOverrideSource]]:
        """Configured sources in order, None when the default parameter source applies"""
        if self.model.overrides is None:
            return None
        sources: List[VersionOverrideSource] = []
        for entry in self.model.overrides:
            if entry.env is not None:
                sources.append(EnvironmentVersionOverride(entry.env, environ))
            else:
                sources.append(ParameterVersionOverride(parameters, entry.parameter))
        return sources

    def resolver(self, parameters: Optional[Mapping[str, Optional[str]]] = None,
                 environ: Optional[Mapping[str, str]] = None) -> VersionResolver:
        parameters = {} if parameters is None else parameters
        return VersionResolver(self.override_sources(parameters, environ), parameters, environ)

    def resolve_version(self, parameters: Optional[Mapping[str, Optional[str]]] = None,
                        environ: Optional[Mapping[str, str]] = None) -> Version:
        resolver = self.resolver(parameters, environ)
        override = resolver.version_override()
        if override is not None:
            return override
        if self.version_spec is not None:
            return resolver.parse(self.version_spec)
        logger.info(f"Reading version from '{self.version_file}'")
        return load_version(self.version_file)

    def dependencies(self) -> Dict[str, List[Dependency]]:
        return {
            cfg_name: [Dependency.parse(c) for c in coordinates]
            for cfg_name, coordinates in self.model.checks.configurations.items()
        }

    def checker(self, fail_on_error: Optional[bool] = None) -> ProductionDependencyChecker:
        if fail_on_error is None:
            fail_on_error = self.model.checks.fail_on_error
        return ProductionDependencyChecker(self.dependencies(), fail_on_error)
