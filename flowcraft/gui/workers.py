"""Background worker for controller commands; keeps the GUI responsive during file I/O."""

from typing import Any, Callable

from PySide6.QtCore import QThread, Signal

from flowcraft.core.exceptions import FlowCraftError, UserCancelled


class CommandWorker(QThread):
    """
    Runs one controller call in a background thread.
    Emits succeeded(result), cancelled() for UserCancelled, or failed(message).
    """

    succeeded = Signal(object)
    cancelled = Signal()
    failed = Signal(str)

    def __init__(self, name: str, fn: Callable[..., Any], *args, **kwargs):
        super().__init__()
        self.command_name = name
        self._fn = fn
        self._args = args
        self._kwargs = kwargs

    def run(self):
        try:
            result = self._fn(*self._args, **self._kwargs)
        except UserCancelled:
            self.cancelled.emit()
            return
        except FlowCraftError as e:
            self.failed.emit(str(e))
            return
        except Exception as e:
            self.failed.emit("%s failed: %s" % (self.command_name, e))
            return
        self.succeeded.emit(result)
