"""Infrastructure layer — filesystem integration.

This layer wraps all interaction with the bundled templates directory
and the consumer project.  Every raw ``OSError`` raised while writing
must be caught here and re-raised as a
:class:`~copilot_prompts_kit.exceptions.PromptsKitError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from copilot_prompts_kit.infra.filesystem import (
    BUNDLED_TEMPLATES_DIR,
    LocalTargetProject,
    LocalTemplateSource,
)

__all__: list[str] = [
    "BUNDLED_TEMPLATES_DIR",
    "LocalTargetProject",
    "LocalTemplateSource",
]
