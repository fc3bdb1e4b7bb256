# Qt adapters: file picker dialogs, command workers, controller signals

from flowcraft.gui.dialogs import QtFilePicker, qt_filter_string
from flowcraft.gui.qt_controller import QtController
from flowcraft.gui.workers import CommandWorker

__all__ = ["QtFilePicker", "qt_filter_string", "QtController", "CommandWorker"]
