"""Application context with dependency injection.

MarketkitContext holds every dependency a command needs. It is created once at
the CLI entry point and threaded through commands via click's context object.
"""

from dataclasses import dataclass
from pathlib import Path

from marketkit.config import CONFIG_FILE, MarketkitConfig, load_config
from marketkit.integrations.notifier.abc import Notifier
from marketkit.io.marketplace import find_bundle_root


@dataclass(frozen=True)
class MarketkitContext:
    """Immutable context holding all dependencies for marketkit operations.

    Attributes:
        notifier: Desktop notification integration
        config: Settings loaded from marketkit.toml
        cwd: Directory the command was invoked from
        debug: Debug flag for error handling (full stack traces)
    """

    notifier: Notifier
    config: MarketkitConfig
    cwd: Path
    debug: bool

    @staticmethod
    def for_test(
        notifier: Notifier | None = None,
        config: MarketkitConfig | None = None,
        cwd: Path | None = None,
        debug: bool = False,
    ) -> "MarketkitContext":
        """Create test context with fakes for any unspecified dependency.

        Example:
            >>> from marketkit.integrations.notifier.fake import FakeNotifier
            >>> ctx = MarketkitContext.for_test(notifier=FakeNotifier(available=False))
        """
        from marketkit.integrations.notifier.fake import FakeNotifier

        resolved_notifier: Notifier = notifier if notifier is not None else FakeNotifier()
        resolved_config = config if config is not None else MarketkitConfig()
        resolved_cwd = cwd if cwd is not None else Path("/fake/bundle")

        return MarketkitContext(
            notifier=resolved_notifier,
            config=resolved_config,
            cwd=resolved_cwd,
            debug=debug,
        )


def create_context(*, debug: bool, config_path: Path | None = None) -> MarketkitContext:
    """Create production context with real implementations.

    Without an explicit config_path, marketkit.toml is looked up at the bundle
    root containing the current directory; a missing file means defaults.

    Raises:
        FileNotFoundError: If an explicit config_path does not exist
        ConfigError: If the config file is invalid
    """
    from marketkit.integrations.notifier.real import RealNotifier

    cwd = Path.cwd()
    if config_path is not None:
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
    else:
        bundle_root = find_bundle_root(cwd)
        if bundle_root is not None:
            config_path = bundle_root / CONFIG_FILE

    config = load_config(config_path)
    notifier = RealNotifier(backend=config.notify.backend, timeout=config.notify.timeout)

    return MarketkitContext(notifier=notifier, config=config, cwd=cwd, debug=debug)


def resolve_bundle_root(ctx: MarketkitContext, path: Path | None) -> Path:
    """Bundle root from an explicit --path, or discovered from the context's cwd.

    Raises:
        FileNotFoundError: If no bundle root can be found
    """
    start = path if path is not None else ctx.cwd
    root = find_bundle_root(start)
    if root is None:
        raise FileNotFoundError(f"No .claude-plugin/marketplace.json found at or above {start}")
    return root
