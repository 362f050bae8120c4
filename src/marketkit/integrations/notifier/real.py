"""Real notifier that shells out to an OS notification binary."""

import logging
import shutil

from marketkit.integrations.notifier.abc import Notifier
from marketkit.subprocess_utils import run_subprocess_with_context

logger = logging.getLogger(__name__)

# Probe order for backend="auto"
BACKEND_BINARIES: dict[str, str] = {
    "terminal-notifier": "terminal-notifier",
    "osascript": "osascript",
    "notify-send": "notify-send",
}


def _applescript_quote(value: str) -> str:
    return '"' + value.replace("\\", "\\\\").replace('"', '\\"') + '"'


def build_notification_command(backend: str, title: str, message: str) -> list[str]:
    """Argument vector for one backend."""
    if backend == "terminal-notifier":
        return ["terminal-notifier", "-title", title, "-message", message]
    if backend == "osascript":
        script = (
            f"display notification {_applescript_quote(message)} "
            f"with title {_applescript_quote(title)}"
        )
        return ["osascript", "-e", script]
    if backend == "notify-send":
        return ["notify-send", title, message]
    raise ValueError(f"Unknown notification backend: {backend}")


class RealNotifier(Notifier):
    """Production notifier invoking exactly one external command per call."""

    def __init__(self, backend: str = "auto", timeout: int = 10) -> None:
        self._backend = backend
        self._timeout = timeout

    def resolve_backend(self) -> str | None:
        """Concrete backend to use, or None if no binary is installed."""
        if self._backend != "auto":
            if shutil.which(BACKEND_BINARIES[self._backend]) is None:
                return None
            return self._backend

        for backend, binary in BACKEND_BINARIES.items():
            if shutil.which(binary) is not None:
                return backend
        return None

    def is_available(self) -> bool:
        return self.resolve_backend() is not None

    def notify(self, title: str, message: str) -> bool:
        backend = self.resolve_backend()
        if backend is None:
            logger.debug("No notification binary found for backend=%s", self._backend)
            return False

        cmd = build_notification_command(backend, title, message)
        try:
            run_subprocess_with_context(
                cmd,
                operation_context="send desktop notification",
                timeout=self._timeout,
            )
        except RuntimeError as e:
            logger.debug("Notification not delivered: %s", e)
            return False

        logger.debug("Notification delivered via %s", backend)
        return True
