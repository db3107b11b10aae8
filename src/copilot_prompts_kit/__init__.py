"""copilot-prompts-kit — install GitHub Copilot prompts into a project.

Copies the bundled prompt, partial, instruction and skill templates into
``.github/`` of the current project.  The names shipped with this
release are exported here for programmatic consumers.
"""

from copilot_prompts_kit.utils.constants import (
    INSTRUCTIONS,
    PARTIALS,
    SKILLS,
    UTILITY_PROMPTS,
    WORKFLOW_PROMPTS,
)
from copilot_prompts_kit.version import __version__

VERSION: str = __version__

PROMPTS: dict[str, tuple[str, ...]] = {
    "workflow": WORKFLOW_PROMPTS,
    "utility": UTILITY_PROMPTS,
}

__all__: list[str] = [
    "INSTRUCTIONS",
    "PARTIALS",
    "PROMPTS",
    "SKILLS",
    "VERSION",
    "__version__",
]
