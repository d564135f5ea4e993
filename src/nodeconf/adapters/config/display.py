"""Display a resolved node configuration.

Human output is a Rich table; JSON output uses the same key names as the
configuration file so it can be saved and fed back in. Pending log output
is flushed first so it does not interleave with the configuration.
"""

from __future__ import annotations

import lib_log_rich.runtime
import orjson
import rich_click as click
from rich.console import Console
from rich.table import Table

from nodeconf.domain.configuration import Configuration
from nodeconf.domain.enums import OutputFormat


def _render_table(configuration: Configuration) -> Table:
    table = Table(title="Node configuration", show_header=True, header_style="bold")
    table.add_column("key", style="cyan")
    table.add_column("value")
    for key, value in configuration.as_dict().items():
        if isinstance(value, dict):
            rendered = ", ".join(f"{k}={v}" for k, v in sorted(value.items())) or "-"
        else:
            rendered = str(value)
        table.add_row(key, rendered)
    return table


def display_configuration(
    configuration: Configuration,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    console: Console | None = None,
) -> None:
    """Write ``configuration`` to stdout.

    Args:
        configuration: Resolved configuration.
        output_format: OutputFormat.HUMAN for a table, OutputFormat.JSON for
            a JSON document.
        console: Optional Rich Console for human output; mainly for tests.
    """
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.flush()

    if output_format is OutputFormat.JSON:
        payload = orjson.dumps(configuration.as_dict(), option=orjson.OPT_INDENT_2 | orjson.OPT_SORT_KEYS)
        click.echo(payload.decode())
        return
    (console or Console()).print(_render_table(configuration))


__all__ = ["display_configuration"]
