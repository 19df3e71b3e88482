"""Build command resolution.

Picks the script in package.json that builds the project and assembles
the install -> build -> production install -> cleanup pipeline around it.
Nothing here touches the filesystem except BuildContext.from_directory.
"""
import os
from dataclasses import dataclass
from typing import Optional

from .constants import (
    BUILD_SCRIPT_NAMES,
    CLEANUP_COMMAND,
    COMMAND_SEPARATOR,
    INSTALL_COMMAND,
    METADATA_DIR,
    PRODUCTION_INSTALL_COMMAND,
)
from .manifest import get_scripts, load_manifest


@dataclass(frozen=True)
class BuildContext:
    """Everything the assembler needs, gathered up front."""
    working_dir: str
    build_command: Optional[str] = None
    manifest: Optional[dict] = None
    has_metadata_dir: bool = False

    @classmethod
    def from_directory(cls, working_dir, build_command=None):
        return cls(
            working_dir=working_dir,
            build_command=build_command,
            manifest=load_manifest(working_dir),
            has_metadata_dir=os.path.isdir(os.path.join(working_dir, METADATA_DIR)),
        )


def detect_build_command(manifest):
    """Return the highest-priority build script name defined in the manifest, or None."""
    scripts = get_scripts(manifest)
    for name in BUILD_SCRIPT_NAMES:
        if name in scripts:
            return name
    return None


def split_commands(command):
    """Split an &&-joined command string into trimmed, non-empty fragments."""
    if not command:
        return []
    fragments = (fragment.strip() for fragment in command.split(COMMAND_SEPARATOR))
    return [fragment for fragment in fragments if fragment]


def get_build_commands(build_context):
    build_script = detect_build_command(build_context.manifest)
    build_line = f"yarn {build_script}" if build_script else None

    # install is always synthesized and the detected build always follows the override
    commands = [INSTALL_COMMAND]
    commands.extend(
        command for command in split_commands(build_context.build_command)
        if command not in (INSTALL_COMMAND, build_line)
    )
    if build_line:
        commands.append(build_line)

    commands.append(PRODUCTION_INSTALL_COMMAND)
    if build_context.has_metadata_dir:
        commands.append(CLEANUP_COMMAND)
    return commands


def resolve_build_commands(working_dir, build_command=None):
    """Load the project at working_dir and return its build pipeline."""
    return get_build_commands(BuildContext.from_directory(working_dir, build_command))
