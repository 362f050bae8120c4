"""marketkit: authoring and runtime tooling for a Claude Code plugin marketplace.

Import from submodules:
- version: __version__
- io: load_marketplace, load_plugin_manifest, discover_skills
- operations: validate_bundle, resolve_skill
"""

from marketkit.version import __version__ as __version__
