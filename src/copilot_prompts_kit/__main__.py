"""Allow ``python -m copilot_prompts_kit`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m copilot_prompts_kit`` behaves identically to the
``copilot-prompts`` console script.
"""

from __future__ import annotations

from copilot_prompts_kit.cli.app import cli

if __name__ == "__main__":
    cli()
