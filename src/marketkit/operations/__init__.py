"""Bundle operations.

Import from submodules:
- validation: validate_bundle
- skills: list_skills, parse_trigger, resolve_skill
- versioning: bump_version, bump_plugin_version
"""
