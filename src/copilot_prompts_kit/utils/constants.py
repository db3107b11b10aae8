"""Well-known names, paths and payloads shared across layers.

The workflow prompt order lives here once so that the help text and the
``list`` command can never drift apart.
"""

from __future__ import annotations

from typing import Any

# ---------------------------------------------------------------------------
# Bundled catalog
# ---------------------------------------------------------------------------

WORKFLOW_PROMPTS: tuple[str, ...] = (
    "analyze-ticket",
    "create-plan",
    "work-ticket",
    "prepare-pr",
    "create-pr",
    "finalize-pr",
)
"""Canonical order of the ticket-to-PR workflow prompts."""

UTILITY_PROMPTS: tuple[str, ...] = ("review-code", "fix-issues", "add-tests")

PARTIALS: tuple[str, ...] = (
    "validations",
    "git-operations",
    "jira-integration",
    "documentation",
    "pr-template",
)

INSTRUCTIONS: tuple[str, ...] = (
    "typescript",
    "react-components",
    "server-actions",
    "tests",
    "css-styling",
)

SKILLS: tuple[str, ...] = (
    "component-architecture",
    "domain-driven-design",
    "testing-patterns",
)

# ---------------------------------------------------------------------------
# File naming
# ---------------------------------------------------------------------------

PROMPT_SUFFIX: str = ".prompt.md"
MARKDOWN_SUFFIX: str = ".md"
PARTIALS_README: str = "README.md"

# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------

TARGET_DIRNAME: str = ".github"
"""Configuration root created under the target project."""

PARTIALS_DIRNAME: str = "_partials"

CONFIG_FILENAME: str = ".copilot-prompts.json"

DEFAULT_CONFIG: dict[str, Any] = {
    "jira": {
        "projectKey": "PROJECT",
        "baseUrl": "https://your-org.atlassian.net",
    },
    "git": {
        "defaultBranch": "dev",
        "branchPrefix": {
            "feature": "feature/",
            "bugfix": "bugfix/",
            "hotfix": "hotfix/",
        },
    },
    "pr": {
        "targetBranch": "dev",
        "template": "default",
    },
}
"""Payload written to :data:`CONFIG_FILENAME` when it does not exist."""

CONFIG_INDENT: int = 2

# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------

PROG_NAME: str = "copilot-prompts"

NEXT_STEPS: tuple[str, ...] = (
    f"Update {CONFIG_FILENAME} with your Jira project key",
    "Configure Atlassian MCP in VS Code",
    'Run prompts via Command Palette > "GitHub Copilot: Run Prompt"',
)
