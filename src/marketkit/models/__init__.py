"""Data models for marketkit.

Import from submodules:
- marketplace: Author, MarketplaceOwner, MarketplaceMetadata, PluginEntry, MarketplaceRegistry
- plugin: PluginManifest
- skill: SkillFrontmatter, SkillDocument
- hooks: HookCommand, HookMatcherGroup, HooksConfig
- validation: ValidationIssue, ValidationReport
"""
