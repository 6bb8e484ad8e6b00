class SemVerError(Exception):
    """Base exception for all application-specific errors."""

    pass


# --- 1. Errors related to parsing and building versions ---
class MissingInputError(SemVerError, TypeError):
    """Raised when no text, identifier or source is supplied (None)."""

    pass


class MalformedVersionError(SemVerError, ValueError):
    """Raised when text does not conform to the semantic version grammar."""

    def __init__(self, text: str, message: str | None = None):
        self.text = text
        super().__init__(message or f"Invalid semantic version specification: '{text}'")


class InvalidIdentifierError(SemVerError, ValueError):
    """Raised when a pre-release or build metadata identifier is not valid."""

    def __init__(self, identifier: str, kind: str = "identifier"):
        self.identifier = identifier
        super().__init__(f"Invalid {kind}: '{identifier}'")


# --- 2. Errors related to reading a version from a text source ---
class NoVersionFoundError(SemVerError):
    """Raised when a scanned source ends without a version line."""

    pass


class UnreadableSourceError(SemVerError, OSError):
    """Raised when a version holder file cannot be opened or read."""

    def __init__(self, source, reason: str | None = None):
        self.source = source
        message = f"Unable to read version holder '{source}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


# --- 3. Errors related to loading and parsing the configuration file ---
class ConfigurationError(SemVerError):
    """Base class for errors encountered while finding, reading, or parsing config files."""

    pass


class ConfigFileMissingError(ConfigurationError):
    """Raised when the configuration file cannot be found."""

    pass


class ConfigParsingError(ConfigurationError):
    """Raised when a YAML configuration file is syntactically incorrect."""

    pass


class ConfigValidationError(ConfigurationError):
    """Raised when the configuration fails structural validation (e.g., Pydantic)."""

    pass


# --- 4. Errors raised by the collaborator layer ---
class OverrideError(SemVerError):
    """Raised when an active override source provides an invalid version."""

    def __init__(self, source):
        self.source = source
        super().__init__(f"Invalid semantic version: {source}")


class NonProductionDependencyError(SemVerError):
    """Raised when a configuration contains dependencies that are not production grade."""

    def __init__(self, configuration: str, dependencies: list, message: str):
        self.configuration = configuration
        self.dependencies = list(dependencies)
        super().__init__(message)
