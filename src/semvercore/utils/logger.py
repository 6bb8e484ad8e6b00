import logging
import os
import sys

import colorlog

from .. import constants

PACKAGE_PREFIX = "semvercore."

CONSOLE_FORMAT = "%(levelname)-7s %(name)s | %(message)s"
FILE_FORMAT = "%(asctime)s %(levelname)-7s %(name)s | %(message)s"
LEVEL_COLORS = {
    "DEBUG": "thin_white",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "bold_red",
}


def setup_logger(debug: bool = False, module_levels: dict | None = None, log_file: str | None = None):
    """
    Configure the root logger used by the `semver` command.

    Console output goes to stderr so that command results on stdout stay
    machine readable. Colors are used on a terminal unless NO_COLOR is set.

    Args:
        debug: Log DEBUG records instead of INFO and above
        module_levels: Per-module levels, keys may be aliases (see `LOG_ALIAS_MAP`)
        log_file: Also write every record to this file
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG if debug else logging.INFO)

    # handlers installed by an earlier call (or by a test harness) are kept
    if not root.handlers:
        console = logging.StreamHandler(sys.stderr)
        console.setFormatter(_console_formatter(sys.stderr))
        root.addHandler(console)
        if log_file:
            _add_file_handler(root, log_file)

    _apply_module_levels(module_levels)


def _console_formatter(stream) -> logging.Formatter:
    if stream.isatty() and not os.environ.get("NO_COLOR"):
        return colorlog.ColoredFormatter("%(log_color)s" + CONSOLE_FORMAT, log_colors=LEVEL_COLORS)
    return logging.Formatter(CONSOLE_FORMAT)


def _add_file_handler(root: logging.Logger, log_file: str):
    try:
        handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
    except OSError as e:
        logging.error(f"Cannot write log file '{log_file}': {e}")
        return
    handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    root.addHandler(handler)
    logging.debug(f"Writing log records to '{log_file}'")


def parse_module_levels(spec: str | None) -> dict:
    """Parse `name=LEVEL,name=LEVEL` into a mapping, skipping malformed pairs."""
    module_levels = {}
    for pair in (spec or "").split(","):
        name, sep, level = pair.partition("=")
        if sep and name.strip():
            module_levels[name.strip()] = level.strip().upper()
    return module_levels


def _apply_module_levels(module_levels: dict | None):
    """Set logger levels from `module_levels`, or from SEMVER_LOG_LEVELS when it is None."""
    if module_levels is None:
        module_levels = parse_module_levels(os.environ.get(constants.LOG_LEVELS_ENV))

    for name, level_name in module_levels.items():
        level = logging.getLevelName(str(level_name).upper())
        if not isinstance(level, int):
            logging.warning(f"Ignoring unknown log level '{level_name}' for '{name}'")
            continue
        logging.getLogger(_normalize_module_name(name)).setLevel(level)


def _normalize_module_name(name: str) -> str:
    """
    Map a short logger name to its full name.

    Aliases expand first; `version.*` means the `version` logger itself;
    names of our own top-level modules get the package prefix.
    """
    if name in constants.LOG_ALIAS_MAP:
        return constants.LOG_ALIAS_MAP[name]
    name = name.removesuffix(".*")
    if name.startswith(PACKAGE_PREFIX):
        return name
    if name.partition(".")[0] in constants.KNOWN_TOP_MODULES:
        return PACKAGE_PREFIX + name
    return name
