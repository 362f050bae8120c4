from marketkit.integrations.notifier.abc import Notifier
from marketkit.integrations.notifier.real import RealNotifier

__all__ = ["Notifier", "RealNotifier"]
