"""Console script entry point with production wiring.

Lives at package level, outside the adapters, so composition is wired in
without the CLI importing it directly.
"""

from __future__ import annotations

from .adapters.cli.main import main as cli_main
from .composition import build_production


def main() -> int:
    """Run the CLI with production services wired in."""
    return cli_main(services_factory=build_production)


__all__ = ["main"]
