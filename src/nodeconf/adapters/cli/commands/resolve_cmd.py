"""Resolve and print the node configuration.

Collects the CLI/environment source, reads the JSON configuration file,
merges both with CLI values taking precedence, fills the remaining fields
from fallbacks, and prints the result.

Contents:
    * :func:`cli_resolve` - Resolve the configuration from all sources.
"""

from __future__ import annotations

import logging
from pathlib import Path

import rich_click as click

from nodeconf.adapters.config.loader import load_node_settings
from nodeconf.adapters.sources.flags import FlagValues, partial_from_flags
from nodeconf.application.use_cases import load_configuration
from nodeconf.domain.enums import IPFamily, OutputFormat
from nodeconf.domain.errors import ConfigurationError

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context, log_context
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)


@click.command("resolve", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("-a", "--addr", envvar="NODECONF_ADDRESS", default=None, help="The address the agent should listen on")
@click.option(
    "-p", "--port", envvar="NODECONF_PORT", default=None, help="The port the agent should listen on. Defaults to 3000"
)
@click.option(
    "--max-pods",
    envvar="NODECONF_MAX_PODS",
    default=None,
    help="The maximum pods for this node (reported to the cluster). Defaults to 110",
)
@click.option(
    "--tls-cert-file",
    envvar="NODECONF_TLS_CERT_FILE",
    default=None,
    help="Path to the TLS certificate. Defaults to $DATA_DIR/config/nodeconf.crt",
)
@click.option(
    "--tls-private-key-file",
    envvar="NODECONF_TLS_PRIVATE_KEY_FILE",
    default=None,
    help="Path to the TLS private key. Defaults to $DATA_DIR/config/nodeconf.key",
)
@click.option(
    "-n",
    "--node-ip",
    envvar="NODECONF_NODE_IP",
    default=None,
    help="IP address registered for this node. Defaults to the address of the hostname in DNS",
)
@click.option(
    "--node-labels",
    envvar="NODECONF_NODE_LABELS",
    multiple=True,
    default=(),
    metavar="KEY=VALUE[,KEY=VALUE...]",
    help="Labels to add when registering the node (repeatable, comma-separated)",
)
@click.option(
    "--hostname", envvar="NODECONF_HOSTNAME", default=None, help="Hostname for this node. Defaults to this machine's"
)
@click.option(
    "--node-name",
    envvar="NODECONF_NODE_NAME",
    default=None,
    help="Name of this node in the cluster. Defaults to the lower-cased hostname",
)
@click.option(
    "--data-dir", envvar="NODECONF_DATA_DIR", default=None, help="Data directory for the agent. Defaults to ~/.nodeconf"
)
@click.option(
    "--bootstrap-file",
    envvar="NODECONF_BOOTSTRAP_FILE",
    default=None,
    help="Path to the bootstrap config. Defaults to /etc/kubernetes/bootstrap-kubelet.conf",
)
@click.option(
    "--config-file",
    envvar="NODECONF_CONFIG_FILE",
    default=None,
    help="JSON configuration file; CLI values override it. Defaults to ~/.nodeconf/config/config.json",
)
@click.option(
    "--ip-family",
    type=click.Choice([f.value for f in IPFamily], case_sensitive=False),
    default=None,
    help="Preferred address family for defaulted addresses (overrides tool settings)",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat], case_sensitive=False),
    default=OutputFormat.HUMAN.value,
    help="Output format (human-readable or JSON)",
)
@click.pass_context
def cli_resolve(
    ctx: click.Context,
    addr: str | None,
    port: str | None,
    max_pods: str | None,
    tls_cert_file: str | None,
    tls_private_key_file: str | None,
    node_ip: str | None,
    node_labels: tuple[str, ...],
    hostname: str | None,
    node_name: str | None,
    data_dir: str | None,
    bootstrap_file: str | None,
    config_file: str | None,
    ip_family: str | None,
    output_format: str,
) -> None:
    """Resolve the node configuration from flags, environment, and config file.

    Precedence: CLI/environment -> JSON config file -> defaults
    """
    cli_ctx = get_cli_context(ctx)
    settings = load_node_settings(cli_ctx.config)
    family = IPFamily(ip_family.lower()) if ip_family else settings.ip_family
    config_path = Path(config_file) if config_file else settings.config_file
    fmt = OutputFormat(output_format.lower())

    flags = partial_from_flags(
        FlagValues(
            addr=addr,
            port=port,
            max_pods=max_pods,
            tls_cert_file=tls_cert_file,
            tls_private_key_file=tls_private_key_file,
            node_ip=node_ip,
            node_labels=node_labels,
            hostname=hostname,
            node_name=node_name,
            data_dir=data_dir,
            bootstrap_file=bootstrap_file,
        )
    )

    services = cli_ctx.services
    extra = {"command": "resolve", "ip_family": family.value, "profile": cli_ctx.profile}
    with log_context(job_id="cli-resolve", extra=extra):
        logger.info("Resolving node configuration", extra={"config_file": str(config_path) if config_path else None})
        try:
            configuration = load_configuration(
                flags=flags,
                fallbacks=services.build_fallbacks(family),
                load_file=services.load_config_file,
                default_config_file=services.get_default_config_file,
                config_file=config_path,
            )
        except ConfigurationError as exc:
            logger.error("Configuration could not be resolved", extra={"error": str(exc)})
            click.echo(f"Error: {exc}", err=True)
            raise SystemExit(ExitCode.CONFIG_ERROR) from exc

        services.display_configuration(configuration, output_format=fmt)


__all__ = ["cli_resolve"]
