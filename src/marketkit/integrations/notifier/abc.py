"""Desktop notification abstraction.

Notifications are best-effort: implementations report failure through the
return value and never raise.
"""

from abc import ABC, abstractmethod


class Notifier(ABC):
    """Abstract desktop notifier for dependency injection."""

    @abstractmethod
    def is_available(self) -> bool:
        """Whether a notification binary can be invoked at all."""
        ...

    @abstractmethod
    def notify(self, title: str, message: str) -> bool:
        """Show a notification.

        Args:
            title: Notification title
            message: Notification body

        Returns:
            True if the notification command succeeded, False otherwise
        """
        ...
