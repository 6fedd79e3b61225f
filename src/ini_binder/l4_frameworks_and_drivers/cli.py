"""CLI entry point for ini-binder."""

from __future__ import annotations

import importlib
import logging
import sys
from pathlib import Path

import click
from pydantic import BaseModel, ValidationError

from ini_binder import __version__
from ini_binder.l3_interface_adapters.gateways.ini_config_loader import find_default_config
from ini_binder.l4_frameworks_and_drivers.container import DependencyContainer
from ini_binder.l4_frameworks_and_drivers.logging_setup import parse_log_level, setup_logging

log = logging.getLogger('ini_binder.cli')

DEFAULT_MODEL = 'ini_binder.l1_entities.service_config:ServiceConfig'


def _resolve_model(ctx, param, value: str) -> type[BaseModel]:
    """Turn a ``module:Class`` reference into a record class."""
    module_name, sep, attr = value.partition(':')
    if not sep or not module_name or not attr:
        raise click.BadParameter(f"expected 'module:Class', got '{value}'")
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise click.BadParameter(f"cannot import '{module_name}': {e}") from e
    model = getattr(module, attr, None)
    if not (isinstance(model, type) and issubclass(model, BaseModel)):
        raise click.BadParameter(f"'{value}' is not a pydantic model class")
    return model


def _check_level(ctx, param, value: str) -> str:
    try:
        parse_log_level(value)
    except ValueError as e:
        raise click.BadParameter(str(e)) from e
    return value


@click.command()
@click.argument('config_path', required=False, type=click.Path(dir_okay=False, path_type=Path))
@click.option(
    '-m',
    '--model',
    'model',
    default=DEFAULT_MODEL,
    show_default=True,
    callback=_resolve_model,
    help="Record class to load into, as 'module:Class'.",
)
@click.option(
    '--log-level',
    default='fatal',
    show_default=True,
    callback=_check_level,
    help='debug, info, warning, error or fatal.',
)
@click.option(
    '--log-file',
    default=None,
    type=click.Path(dir_okay=False, path_type=Path),
    help='Write logs to this file instead of stderr.',
)
@click.version_option(version=__version__)
def cli(config_path, model, log_level, log_file):
    """ini-binder -- load an INI file into a record and print it as JSON."""
    setup_logging(log_level, log_file)

    if config_path is None:
        config_path = find_default_config()
        if config_path is None:
            click.echo('Error: no config file given and none found in the default locations.', err=True)
            sys.exit(1)
        log.info('No config path given, using default %s', config_path)

    try:
        target = model()
    except ValidationError as e:
        click.echo(f'Error: {model.__name__} cannot be created with defaults: {e}', err=True)
        sys.exit(1)
    log.debug('Loading %s into %s', config_path, model.__name__)
    result = DependencyContainer().load_use_case.execute(config_path, target)
    if not result.ok:
        click.echo(f'Error: {result.error}', err=True)
        sys.exit(1)
    click.echo(target.model_dump_json(indent=2))
