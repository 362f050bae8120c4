"""Skill trigger resolution.

A trigger is what a user types to invoke a skill: "/name", "name",
"/plugin:name" or "plugin:name".
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from marketkit.errors import AmbiguousSkillError, SkillNotFoundError
from marketkit.io.marketplace import load_marketplace, resolve_plugin_source
from marketkit.io.skills import discover_skills
from marketkit.models.skill import SkillDocument

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SkillTrigger:
    skill_name: str
    plugin_name: str | None = None


def parse_trigger(trigger: str) -> SkillTrigger:
    """Parse a slash-style trigger.

    Raises:
        ValueError: If the trigger is empty or has an empty plugin/skill part
    """
    text = trigger.strip().removeprefix("/")
    if not text:
        raise ValueError(f"Invalid skill trigger: '{trigger}'")

    if ":" in text:
        plugin_name, skill_name = text.split(":", 1)
        if not plugin_name or not skill_name:
            raise ValueError(
                f"Invalid skill trigger: '{trigger}'. Expected /plugin:skill or /skill"
            )
        return SkillTrigger(skill_name=skill_name, plugin_name=plugin_name)

    return SkillTrigger(skill_name=text)


def list_skills(bundle_root: Path) -> list[SkillDocument]:
    """Every skill of every locally sourced plugin, in registry order."""
    registry = load_marketplace(bundle_root)
    skills: list[SkillDocument] = []
    for entry in registry.plugins:
        plugin_dir = resolve_plugin_source(bundle_root, registry, entry)
        if plugin_dir is None or not plugin_dir.is_dir():
            continue
        skills.extend(discover_skills(plugin_dir, entry.name))
    return skills


def resolve_skill(bundle_root: Path, trigger: str) -> SkillDocument:
    """Resolve a trigger to exactly one skill.

    Raises:
        SkillNotFoundError: If nothing matches
        AmbiguousSkillError: If a bare name matches skills in several plugins
    """
    parsed = parse_trigger(trigger)
    skills = list_skills(bundle_root)

    matches = [
        skill
        for skill in skills
        if skill.name == parsed.skill_name
        and (parsed.plugin_name is None or skill.plugin_name == parsed.plugin_name)
    ]
    logger.debug("Trigger %s matched %d skill(s)", trigger, len(matches))

    if not matches:
        raise SkillNotFoundError(trigger, [skill.trigger for skill in skills])
    if len(matches) > 1:
        raise AmbiguousSkillError(trigger, [skill.trigger for skill in matches])
    return matches[0]
