"""I/O for marketplace bundle files.

Import from submodules:
- marketplace: find_bundle_root, load_marketplace, resolve_plugin_source
- manifest: load_plugin_manifest
- json_document: load_json_document, save_json_document
- frontmatter: parse_frontmatter, split_frontmatter
- skills: discover_skills, load_skill
- hooks: load_hooks_config
- links: extract_markdown_links
"""
