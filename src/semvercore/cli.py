import click
import json
import logging
import traceback

from .config import Config
from .checker import ProductionDependencyChecker
from .constants import DEFAULT_CONFIG_FILENAME
from .utils import setup_logger, parse_module_levels
from .version import Ordering, Version, compare, is_valid, load_version
from .exceptions import (
    SemVerError,
    ConfigurationError,
    MalformedVersionError,
    InvalidIdentifierError,
    NoVersionFoundError,
    OverrideError,
    NonProductionDependencyError,
)
from . import __version__

COMPARISON_SYMBOLS = {
    Ordering.LESS: "<",
    Ordering.EQUAL: "=",
    Ordering.GREATER: ">",
}


def setup_logging(debug: bool, log_levels: str = None, log_file: str = None):
    """Setup logger with debug and module-level configuration"""
    module_levels = parse_module_levels(log_levels) if log_levels else None
    setup_logger(debug=debug, module_levels=module_levels, log_file=log_file)


def parse_parameters(pairs: tuple) -> dict:
    """Turn `-P name=value` options into a mapping"""
    parameters = {}
    for pair in pairs:
        if '=' not in pair:
            raise click.BadParameter(f"expected name=value, got '{pair}'", param_hint="'-P'")
        name, value = pair.split('=', 1)
        parameters[name.strip()] = value.strip()
    return parameters


def handle_errors(func):
    """Decorator to handle common exceptions"""
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except ConfigurationError as e:
            _report(f"Configuration error: {e}")
        except (MalformedVersionError, InvalidIdentifierError, OverrideError) as e:
            _report(f"Version error: {e}")
        except NoVersionFoundError as e:
            _report(f"No version found: {e}")
        except NonProductionDependencyError as e:
            _report(f"Dependency check failed: {e}")
        except SemVerError as e:
            _report(f"An unexpected application error occurred: {e}")
        except FileNotFoundError as e:
            _report(f"A required file was not found: {e}")
    wrapper.__name__ = func.__name__
    wrapper.__doc__ = func.__doc__
    return wrapper


def _report(message: str):
    logging.error(message)
    ctx = click.get_current_context()
    if ctx.obj and ctx.obj.get('debug'):
        traceback.print_exc()
    raise click.Abort()


@handle_errors
def do_parse(spec: str, as_json: bool):
    version = Version.parse(spec)
    if as_json:
        click.echo(json.dumps(version.as_dict(), indent=2))
    else:
        click.echo(str(version))


@handle_errors
def do_scan(version_file: str):
    version = load_version(version_file)
    logging.debug(f"Found version {version!r} in '{version_file}'")
    click.echo(str(version))


@handle_errors
def do_compare(first: str, second: str):
    result = compare(Version.parse(first), Version.parse(second))
    click.echo(COMPARISON_SYMBOLS[result])


@handle_errors
def do_bump(spec: str, pre: tuple, build: tuple, strip: str):
    version = Version.parse(spec)
    if strip == 'pre':
        version = version.strip_pre_release_identifiers()
    elif strip == 'build':
        version = version.strip_build_metadata_identifiers()
    elif strip == 'all':
        version = version.strip_all_identifiers()
    version = version.with_pre_release_identifiers(*pre).with_build_metadata_identifiers(*build)
    click.echo(str(version))


@handle_errors
def do_resolve(config_file: str, parameters: dict):
    config = Config(config_file)
    version = config.resolve_version(parameters)
    click.echo(str(version))


@handle_errors
def do_check(config_file: str, fail_on_error: bool | None):
    config = Config(config_file)
    checker = config.checker(fail_on_error)
    failures = checker.check()
    if not failures:
        logging.info("All dependencies are production grade.")
        return
    for cfg_name, dependencies in failures.items():
        logging.warning(ProductionDependencyChecker.error_message(cfg_name, dependencies))


@click.group()
@click.option('--debug', is_flag=True, help='Enable debug logging')
@click.option('-l', '--log-levels', help="Comma-separated per-module log levels (e.g., 'ovr=DEBUG,chk=INFO')")
@click.option('-f', '--log-file', help='Path to log file')
@click.version_option(version=__version__, prog_name='semvercore')
@click.pass_context
def cli(ctx, debug, log_levels, log_file):
    """Semantic Version tools - parse, compare and resolve project versions

    \b
    Examples:
      semver parse 1.4.0-rc.1+build.7    Print the canonical form
      semver compare 1.2.3 1.2.3+Build  Print '<', '=' or '>'
      semver resolve -c semver.yml       Resolve the project version
    """
    ctx.ensure_object(dict)
    ctx.obj['debug'] = debug
    setup_logging(debug, log_levels, log_file)


@cli.command()
@click.argument('spec')
@click.option('--json', 'as_json', is_flag=True, help='Print all version fields as JSON')
def parse(spec, as_json):
    """Parse a version specification"""
    do_parse(spec, as_json)


@cli.command()
@click.argument('spec')
@click.pass_context
def validate(ctx, spec):
    """Exit with status 0 when SPEC is a valid semantic version"""
    if is_valid(spec):
        click.echo(f"{spec.strip()} is valid")
        return
    click.echo(f"{spec} is not a valid semantic version", err=True)
    ctx.exit(1)


@cli.command()
@click.argument('version_file', type=click.Path(dir_okay=False))
def scan(version_file):
    """Print the version held by a version file

    \b
    Blank lines and comments (# or //) before the version line are skipped.
    """
    do_scan(version_file)


@cli.command(name='compare')
@click.argument('first')
@click.argument('second')
def compare_cmd(first, second):
    """Compare precedence of two versions (build metadata is ignored)"""
    do_compare(first, second)


@cli.command()
@click.argument('spec')
@click.option('-p', '--pre', multiple=True, help='Pre-release identifier to append')
@click.option('-b', '--build', multiple=True, help='Build metadata identifier to append')
@click.option('-s', '--strip', type=click.Choice(['pre', 'build', 'all']), help='Identifiers to strip first')
def bump(spec, pre, build, strip):
    """Derive a version by stripping and appending identifiers

    \b
    Examples:
      semver bump 1.2.3 -p SNAPSHOT          1.2.3-SNAPSHOT
      semver bump 1.2.3-rc.1+b5 -s all -b 9  1.2.3+9
    """
    do_bump(spec, pre, build, strip)


@cli.command()
@click.option('-c', '--config', 'config_file', default=DEFAULT_CONFIG_FILENAME, show_default=True,
              type=click.Path(dir_okay=False), help='Config file path')
@click.option('-P', '--parameter', 'parameters', multiple=True, help='Project parameter name=value')
def resolve(config_file, parameters):
    """Resolve the project version, applying active overrides"""
    do_resolve(config_file, parse_parameters(parameters))


@cli.command()
@click.option('-c', '--config', 'config_file', default=DEFAULT_CONFIG_FILENAME, show_default=True,
              type=click.Path(dir_okay=False), help='Config file path')
@click.option('--fail/--no-fail', 'fail_on_error', default=None, help='Override checks.fail_on_error')
def check(config_file, fail_on_error):
    """Check that configured dependencies are production grade"""
    do_check(config_file, fail_on_error)
