"""
Semver Core Utils Module

- logger: Logging setup and configuration

Usage:
    from semvercore.utils import setup_logger
"""

from .logger import setup_logger, parse_module_levels

__all__ = [
    'setup_logger',
    'parse_module_levels',
]
