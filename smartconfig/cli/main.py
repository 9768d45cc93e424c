"""
smartconfig CLI - inspect resolved ledger client configuration.

Main entry point for all CLI commands. Output is JSON on stdout; logs go
to stderr.
"""

import asyncio
import json
import logging
from typing import Any

import click

from smartconfig.core.store import ConfigStore
from smartconfig.errors import SmartConfigError
from smartconfig.service import SmartConfigService, create_service
from smartconfig.utils.logger import LoggingConfig, get_logger, setup_logging

logger = get_logger("cli")


def _echo_json(value: Any) -> None:
    click.echo(json.dumps(value, indent=2, default=str))


def _service(ctx: click.Context) -> SmartConfigService:
    """Build the service lazily so config errors surface per command."""
    store: ConfigStore = ctx.obj["store"]
    try:
        return create_service(store)
    except SmartConfigError as e:
        raise click.ClickException(str(e)) from e


def _run(ctx: click.Context, method: str) -> Any:
    service = _service(ctx)
    try:
        result = getattr(service, method)()
        if asyncio.iscoroutine(result):
            result = asyncio.run(result)
        return result
    except SmartConfigError as e:
        logger.debug(f"{method} failed: {e!r}")
        raise click.ClickException(str(e)) from e


@click.group()
@click.option("--config", "config_path", envvar="SMART_CONFIG_FILE", default=None,
              type=click.Path(dir_okay=False), help="JSON or TOML configuration file")
@click.option("--registry-url", default=None, help="Override smartConfig.smartRegistryUrl")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.version_option(version="0.1.0")
@click.pass_context
def cli(ctx, config_path, registry_url, debug):
    """Resolve ledger network configuration"""
    try:
        store = ConfigStore.from_file(config_path) if config_path else ConfigStore()
        store = store.merged(ConfigStore.from_env())
    except SmartConfigError as e:
        raise click.ClickException(str(e)) from e

    if registry_url:
        store = store.merged({"smartConfig": {"smartRegistryUrl": registry_url}})

    debug = debug or bool(store.get("logging.debug", False))
    setup_logging(LoggingConfig(level=logging.WARNING, debug=debug))

    ctx.ensure_object(dict)
    ctx.obj["store"] = store


# =============================================================================
# Plain Lookups
# =============================================================================


@cli.command("environment")
@click.pass_context
def environment(ctx):
    """Show the configured ledger environment"""
    _echo_json(_run(ctx, "get_environment"))


@cli.command("client-env")
@click.pass_context
def client_env(ctx):
    """Show the client environment as a ledger id"""
    ledger_id = _run(ctx, "get_client_environment")
    _echo_json({"ledger": ledger_id.name, "byte": ledger_id.to_bytes().hex()})


@cli.command("issuer")
@click.pass_context
def issuer(ctx):
    """Show the issuer configuration"""
    _echo_json(_run(ctx, "get_issuer"))


@cli.command("operator")
@click.pass_context
def operator(ctx):
    """Show the client operator configuration"""
    _echo_json(_run(ctx, "get_operator"))


@cli.command("mirror-node")
@click.pass_context
def mirror_node(ctx):
    """Show the mirror node configuration"""
    _echo_json(_run(ctx, "get_mirror_node"))


# =============================================================================
# Network Resources
# =============================================================================


@cli.command("nodes")
@click.pass_context
def nodes(ctx):
    """List network nodes"""
    _echo_json(_run(ctx, "get_nodes"))


@cli.command("utilities")
@click.pass_context
def utilities(ctx):
    """List network utilities"""
    _echo_json(_run(ctx, "get_utilities"))


@cli.command("fees")
@click.pass_context
def fees(ctx):
    """Show the fee schedule"""
    _echo_json(_run(ctx, "get_fees"))


@cli.command("threshold")
@click.pass_context
def threshold(ctx):
    """Show the consensus threshold"""
    _echo_json(_run(ctx, "get_threshold"))


@cli.command("show")
@click.pass_context
def show(ctx):
    """Summarize where network resources come from"""
    service = _service(ctx)
    options = service.options
    source = "custom_network" if service.resolved_network() is not None else "registry"

    _echo_json({
        "environment": options.environment,
        "network": options.network,
        "client_environment": options.client_environment,
        "registry": options.smart_registry_url,
        "source": source,
    })


if __name__ == "__main__":
    cli()
