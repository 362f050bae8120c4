"""Skill CLI commands."""

from pathlib import Path

import click

from marketkit.commands.options import bundle_path_option
from marketkit.context import MarketkitContext, resolve_bundle_root
from marketkit.error_boundary import cli_error_boundary
from marketkit.operations.skills import list_skills, resolve_skill
from marketkit.output import machine_output, user_output


@click.group(name="skill")
def skill_group() -> None:
    """Discover and resolve bundled skills."""


@skill_group.command(name="list")
@bundle_path_option
@click.pass_obj
@cli_error_boundary
def list_cmd(ctx: MarketkitContext, path: Path | None) -> None:
    """List every skill with its trigger."""
    bundle_root = resolve_bundle_root(ctx, path)
    skills = list_skills(bundle_root)

    if not skills:
        user_output("No skills found.")
        return

    for skill in skills:
        user_output(f"{click.style(skill.trigger, fg='cyan')}  {skill.description}")
    user_output(f"Total: {len(skills)} skill(s)")


@skill_group.command(name="show")
@click.argument("trigger")
@bundle_path_option
@click.option("--references", is_flag=True, help="Also list the skill's reference files.")
@click.pass_obj
@cli_error_boundary
def show_cmd(ctx: MarketkitContext, trigger: str, path: Path | None, references: bool) -> None:
    """Print the guidance document a TRIGGER such as /bash-style-guide resolves to."""
    bundle_root = resolve_bundle_root(ctx, path)
    skill = resolve_skill(bundle_root, trigger)

    machine_output(skill.body.strip())

    if references:
        user_output()
        user_output("References:")
        for reference in skill.reference_files():
            user_output(f"  {reference.relative_to(skill.directory).as_posix()}")


@skill_group.command(name="where")
@click.argument("trigger")
@bundle_path_option
@click.pass_obj
@cli_error_boundary
def where_cmd(ctx: MarketkitContext, trigger: str, path: Path | None) -> None:
    """Print the directory a TRIGGER resolves to."""
    bundle_root = resolve_bundle_root(ctx, path)
    skill = resolve_skill(bundle_root, trigger)
    machine_output(str(skill.directory))
