"""FlowCraft Studio: Mermaid diagram validation and recent-files service layer."""

__version__ = "0.1.0"

from flowcraft.application.controller import FileContent, FlowCraftController, create_controller
from flowcraft.core.event_bus import EventBus
from flowcraft.core.recent import RecencyStore, RecentEntry
from flowcraft.core.state import StateFile
from flowcraft.core.validation import ValidationReport, validate

__all__ = [
    "__version__",
    "FileContent",
    "FlowCraftController",
    "create_controller",
    "EventBus",
    "RecencyStore",
    "RecentEntry",
    "StateFile",
    "ValidationReport",
    "validate",
]
