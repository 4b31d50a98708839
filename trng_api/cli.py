# --------------------------------------------------------------
# File: cli.py
# Description: Interfaz de línea de comandos para el cliente TRNG.
# --------------------------------------------------------------
"""Punto de entrada `trng`: generar contraseñas y enviar órdenes al dispositivo."""

import logging

import click
from pydantic import ValidationError

from trng_api.services import generate_password_sync, send_command_sync
from trng_core.config import DeviceConfig, describe_config_error
from trng_core.models import RemoteCommand


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="DEBUG level logging.")
@click.option("--host", default=None, help="Device host (overrides TRNG_DEVICE_HOST).")
@click.option("--port", type=int, default=None, help="Device port (overrides TRNG_DEVICE_PORT).")
@click.pass_context
def trng(ctx, verbose, host, port):
    """Client for the Klyuchnik TRNG device: generate passwords and send remote commands."""

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)-8s %(name)s: %(message)s",
    )
    try:
        ctx.obj = DeviceConfig.from_env(host=host, port=port)
    except ValidationError as exc:
        raise click.UsageError(describe_config_error(exc)) from exc


@trng.command()
@click.option("--show-debug", is_flag=True, help="Print the generation trace.")
@click.pass_obj
def generate(config, show_debug):
    """Fetch a seed from the device and print the derived password."""

    ok, message, debug = generate_password_sync(config)
    if show_debug and debug:
        click.echo(debug, err=True)
    if not ok:
        raise click.ClickException(message)
    click.echo(message)


def _remote(command: RemoteCommand):
    @click.pass_obj
    def run(config):
        status = send_command_sync(command, config)
        click.echo(status.value)

    run.__doc__ = f"Send {command.value.strip()} to the device (no acknowledgement)."
    return run


for _command in RemoteCommand:
    trng.command(name=_command.name.lower())(_remote(_command))
