"""
Command line access to the log procedures: python -m client_logger
"""
import json
import sys
from typing import Any, Dict, Optional

import click
from pydantic import ValidationError
import requests

from procbus import ProcedureNotFoundError, default_registry
from procbus.client import ProcedureClient, RemoteCallError
from procbus.http import run_server
from client_logger.config import ConfigError, build_logger, load_config
from client_logger.handle import set_logger


def _parse_payload(payload: Optional[str], message: Optional[str], context: Optional[str]) -> Optional[Dict[str, Any]]:
    data: Dict[str, Any] = {}
    if payload:
        try:
            data = json.loads(payload)
        except json.JSONDecodeError as e:
            raise click.BadParameter(f'Invalid JSON: {e}', param_hint='--payload')
        if not isinstance(data, dict):
            raise click.BadParameter('Payload must be a JSON object', param_hint='--payload')
    if message is not None:
        data['message'] = message
    if context is not None:
        data['context'] = context
    return data or None


def _fail(message: str):
    click.echo(click.style(f'❌ {message}', fg='red'), err=True)
    sys.exit(1)


@click.group()
@click.version_option(version='1.0.0')
@click.option('--config', type=click.Path(exists=True), default=None, help='Path to config.yml with a logging section')
def cli(config: Optional[str]):
    """Client Logger CLI - call log procedures by path"""
    try:
        set_logger(build_logger(load_config(config)))
    except ConfigError as e:
        _fail(str(e))


@cli.command()
def procedures():
    """List registered procedures"""
    for procedure in default_registry.procedures():
        click.echo(f'{procedure.key:<16} {procedure.description}')


@cli.command()
@click.argument('path')
@click.option('--payload', default=None, help='JSON object passed as the procedure input')
@click.option('--message', '-m', default=None, help='Shortcut for the "message" field')
@click.option('--context', default=None, help='Shortcut for the "context" field')
def call(path: str, payload: Optional[str], message: Optional[str], context: Optional[str]):
    """
    Invoke a procedure in this process

    PATH: Dotted procedure path, e.g. log.info
    """
    data = _parse_payload(payload, message, context)
    try:
        result = default_registry.call(path, data)
    except ProcedureNotFoundError as e:
        _fail(str(e))
    except ValidationError as e:
        _fail(f'Invalid input for {path}:\n{e}')

    click.echo(json.dumps(result, default=str))


@cli.command()
@click.argument('url')
@click.argument('path')
@click.option('--payload', default=None, help='JSON object passed as the procedure input')
@click.option('--message', '-m', default=None, help='Shortcut for the "message" field')
@click.option('--context', default=None, help='Shortcut for the "context" field')
@click.option('--timeout', default=5.0, help='Request timeout in seconds')
def remote(url: str, path: str, payload: Optional[str], message: Optional[str],
           context: Optional[str], timeout: float):
    """
    Invoke a procedure on a running server

    URL: Server base URL, e.g. http://localhost:8080

    PATH: Dotted procedure path, e.g. log.info
    """
    data = _parse_payload(payload, message, context)
    client = ProcedureClient(url, timeout=timeout)
    try:
        result = client.call(path, data)
    except RemoteCallError as e:
        _fail(str(e))
    except requests.exceptions.RequestException as e:
        _fail(f'Could not reach {url}: {e}')

    click.echo(json.dumps(result, default=str))


@cli.command()
@click.option('--host', default='127.0.0.1', help='Host to bind to')
@click.option('--port', default=8080, help='Port to bind to')
def serve(host: str, port: int):
    """Serve registered procedures over HTTP"""
    click.echo(f'Serving procedures on http://{host}:{port}')
    click.echo(f'API documentation at http://{host}:{port}/docs')
    run_server(host=host, port=port)


if __name__ == '__main__':
    cli()
