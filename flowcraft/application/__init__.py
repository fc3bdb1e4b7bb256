# Application layer: controller, diagram file I/O, templates, export, picker collaborator

from flowcraft.application.controller import FileContent, FlowCraftController, create_controller
from flowcraft.application.export_manager import ExportManager
from flowcraft.application.picker import FilePicker, NoPicker
from flowcraft.application.templates import Template, list_templates

__all__ = [
    "FileContent",
    "FlowCraftController",
    "create_controller",
    "ExportManager",
    "FilePicker",
    "NoPicker",
    "Template",
    "list_templates",
]
