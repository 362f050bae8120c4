"""Fake Notifier implementation for testing.

FakeNotifier records notify() calls without invoking any binary.
"""

from marketkit.integrations.notifier.abc import Notifier


class FakeNotifier(Notifier):
    """In-memory fake that tracks calls.

    This class has NO public setup methods. All state is provided via constructor
    or captured during execution.
    """

    def __init__(self, *, available: bool = True, succeeds: bool = True) -> None:
        self._available = available
        self._succeeds = succeeds
        self._notifications: list[tuple[str, str]] = []

    @property
    def notifications(self) -> list[tuple[str, str]]:
        """(title, message) pairs passed to notify().

        This property is for test assertions only.
        """
        return self._notifications

    def is_available(self) -> bool:
        return self._available

    def notify(self, title: str, message: str) -> bool:
        self._notifications.append((title, message))
        return self._available and self._succeeds
