"""Console script entry point (``nodeconf``) with production services wired.

Lives outside ``adapters`` so the composition root can be imported without
the adapters layer depending on it.
"""

from __future__ import annotations

from .adapters.cli.main import main as cli_main
from .composition import build_production


def main() -> int:
    """Run the CLI with production services and return its exit code."""
    return cli_main(services_factory=build_production)


__all__ = ["main"]
