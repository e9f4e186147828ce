"""Allow ``python -m timelog`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m timelog`` behaves identically to the ``timelog`` console
script.
"""

from __future__ import annotations

from timelog.cli.app import cli

if __name__ == "__main__":
    cli()
