"""Core / service layer — pure business logic and data transformations.

Rules
-----
* No ``print()`` calls.
* No direct filesystem access; everything goes through protocols.
* No imports from ``cli`` or ``infra``.
"""

from copilot_prompts_kit.core.catalog import build_catalog
from copilot_prompts_kit.core.install_service import InstallService
from copilot_prompts_kit.core.models import (
    ActionKind,
    Category,
    CategoryPlan,
    DestinationSnapshot,
    InstallOptions,
    InstallResult,
    PlannedAction,
    PromptCatalog,
)
from copilot_prompts_kit.core.planner import categories_to_install, plan_category
from copilot_prompts_kit.core.protocols import TargetProject, TemplateSource

__all__: list[str] = [
    "ActionKind",
    "Category",
    "CategoryPlan",
    "DestinationSnapshot",
    "InstallOptions",
    "InstallResult",
    "InstallService",
    "PlannedAction",
    "PromptCatalog",
    "TargetProject",
    "TemplateSource",
    "build_catalog",
    "categories_to_install",
    "plan_category",
]
