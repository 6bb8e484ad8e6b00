# --- Log and Debug ---
# Short aliases for module names to keep CLI/env concise
LOG_ALIAS_MAP = {
    "ver": "semvercore.version",
    "scan": "semvercore.version.scanner",
    "ovr": "semvercore.overrides",
    "override": "semvercore.overrides",
    "chk": "semvercore.checker",
    "check": "semvercore.checker",
    "conf": "semvercore.config",
    "cli": "semvercore.cli",
}

# Top-level modules within semvercore for auto-prefixing
KNOWN_TOP_MODULES = {
    "version",
    "overrides",
    "checker",
    "config",
    "cli",
    "utils",
    "exceptions",
}

# Environment variable holding per-module log levels
LOG_LEVELS_ENV = "SEMVER_LOG_LEVELS"

# --- Versions ---
SNAPSHOT_ID = "SNAPSHOT"

# Project parameter consulted for version overrides when nothing else is configured
DEFAULT_OVERRIDE_PARAMETER = "versionOverride"

# Markers of comment lines in version holder files
COMMENT_PREFIXES = ("#", "//")

# Whitespace trimmed around version lines, matching `\s` under re.ASCII
ASCII_WHITESPACE = " \t\n\r\f\v"

# --- Filenames ---
DEFAULT_CONFIG_FILENAME = "semver.yml"
VERSION_FILE_ENCODING = "utf-8"
