"""dbtypes CLI - Main Entry Point.

The `dbtypes` command inspects the field type registries.

Commands:
    backends     - List database types and their type counts
    types        - List the field types of the configured database type
    validations  - List the validations a field type accepts
    check        - Check a type (and optionally a validation) is legal
"""

import json
import logging
import sys
from typing import Optional

import click

from .. import __version__
from ..config import RegistryConfig
from ..faults import Fault, UnknownTypeFault
from ..types import available_backends, get_registry
from . import __cli_name__
from .utils.colors import (
    success, error, dim, section, kv, table,
    _CHECK, _CROSS,
)

logger = logging.getLogger("dbtypes.cli")


def _fail(fault: Fault) -> None:
    error(f"  {_CROSS} {fault}")
    sys.exit(1)


def _registry(ctx: click.Context):
    """Registry for the database type resolved from options and config."""
    try:
        config = RegistryConfig.load(
            path=ctx.obj["config_path"],
            env_file=ctx.obj["env_file"],
            overrides=(
                {"database_type": ctx.obj["database_type"]}
                if ctx.obj["database_type"] else None
            ),
        )
        return config.registry()
    except Fault as fault:
        _fail(fault)


@click.group()
@click.version_option(version=__version__, prog_name=__cli_name__)
@click.option('--database-type', '-d', type=str, help='Database type (mongodb, sql, cassandra, ...)')
@click.option('--config', 'config_path', type=click.Path(exists=True, dir_okay=False), help='YAML config file')
@click.option('--env-file', type=click.Path(dir_okay=False), help='.env file to read')
@click.option('--verbose', '-v', is_flag=True, help='Verbose output')
@click.pass_context
def cli(ctx, database_type: Optional[str], config_path: Optional[str], env_file: Optional[str], verbose: bool):
    """Inspect the field types and validations each database type supports.

    \b
    Examples:
      dbtypes backends
      dbtypes -d mongodb types
      dbtypes -d sql validations String
      dbtypes -d cassandra check String pattern
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    ctx.ensure_object(dict)
    ctx.obj['database_type'] = database_type
    ctx.obj['config_path'] = config_path
    ctx.obj['env_file'] = env_file


@cli.command('backends')
def backends():
    """List database types and how many field types each supports."""
    rows = []
    for name in available_backends():
        rows.append((name, str(len(get_registry(name)))))
    table(["Database type", "Types"], rows)


@cli.command('types')
@click.option('--json', 'as_json', is_flag=True, help='Emit value/name objects as JSON')
@click.pass_context
def types(ctx, as_json: bool):
    """List the field types of the configured database type."""
    registry = _registry(ctx)

    if as_json:
        click.echo(json.dumps(registry.to_value_name_object_array(), indent=2))
        return

    section(registry.backend)
    rows = [
        (name, ", ".join(sorted(registry.get_validations_for_type(name))) or "-")
        for name in registry
    ]
    table(["Type", "Validations"], rows)


@cli.command('validations')
@click.argument('type_name')
@click.option('--json', 'as_json', is_flag=True, help='Emit a JSON list')
@click.pass_context
def validations(ctx, type_name: str, as_json: bool):
    """List the validations TYPE_NAME accepts."""
    registry = _registry(ctx)
    try:
        names = sorted(registry.get_validations_for_type(type_name))
    except UnknownTypeFault as fault:
        _fail(fault)

    if as_json:
        click.echo(json.dumps(names))
        return

    kv("Database type", registry.backend)
    kv("Type", type_name)
    kv("Validations", ", ".join(names) or "-")


@cli.command('check')
@click.argument('type_name')
@click.argument('validation', required=False)
@click.pass_context
def check(ctx, type_name: str, validation: Optional[str]):
    """Exit 0 if TYPE_NAME (and VALIDATION) is legal, 1 otherwise."""
    registry = _registry(ctx)

    if validation is None:
        if registry.contains(type_name):
            success(f"  {_CHECK} {type_name} is a {registry.backend} type")
            return
        _fail(UnknownTypeFault(type_name, registry.backend))

    try:
        supported = registry.is_validation_supported_for_type(type_name, validation)
    except UnknownTypeFault as fault:
        _fail(fault)

    if supported:
        success(f"  {_CHECK} {type_name} supports {validation}")
        return
    error(f"  {_CROSS} {type_name} does not support {validation}")
    dim(f"    supported: {', '.join(sorted(registry.get_validations_for_type(type_name)))}")
    sys.exit(1)


def main():
    """Entry point for `dbtypes` command."""
    cli(obj={})


if __name__ == '__main__':
    main()
