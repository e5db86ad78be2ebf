#!/usr/bin/env python3
"""Stamp build metadata into __init__conf__.py before packaging.

Rewrites the ``build_version``, ``build_time`` and ``git_commit`` assignments
in place so the built distribution reports where it came from. Values not
given on the command line are derived:

    * build_version: ``git describe --tags --dirty``, then ``[project].version``
    * build_time: ``SOURCE_DATE_EPOCH`` when set, otherwise now (UTC, ISO 8601)
    * git_commit: ``git rev-parse HEAD``

Anything that cannot be derived keeps its sentinel. Writes only when the file
content actually changes.
"""

from __future__ import annotations

import argparse
import os
import re
import subprocess
import sys
from datetime import datetime, timezone
from pathlib import Path

import rtoml

STAMP_FIELDS: tuple[str, ...] = ("build_version", "build_time", "git_commit")
_FORBIDDEN_CHARS = ('"', "\\", "\n", "\r")

__all__ = ["STAMP_FIELDS", "collect_build_info", "locate_initconf", "stamp_build_info", "main"]


def _git(project_dir: Path, *args: str) -> str | None:
    """Run a git query in ``project_dir``; None when git or the repo is unavailable."""
    try:
        result = subprocess.run(
            ["git", *args],  # noqa: S607
            cwd=project_dir,
            check=True,
            capture_output=True,
            text=True,
        )
    except (FileNotFoundError, subprocess.CalledProcessError):
        return None
    return result.stdout.strip() or None


def _load_pyproject(project_dir: Path) -> dict[str, object]:
    with (project_dir / "pyproject.toml").open("r", encoding="utf-8") as fh:
        return rtoml.load(fh)


def _pyproject_version(project_dir: Path) -> str | None:
    try:
        project = _load_pyproject(project_dir).get("project", {})
    except FileNotFoundError:
        return None
    version = project.get("version") if isinstance(project, dict) else None
    return str(version) if version else None


def _build_timestamp() -> str:
    epoch = os.environ.get("SOURCE_DATE_EPOCH")
    moment = datetime.fromtimestamp(int(epoch), tz=timezone.utc) if epoch else datetime.now(tz=timezone.utc)
    return moment.strftime("%Y-%m-%dT%H:%M:%SZ")


def collect_build_info(
    project_dir: Path,
    *,
    version: str | None = None,
    build_time: str | None = None,
    git_commit: str | None = None,
) -> dict[str, str]:
    """Resolve the values to stamp, deriving whatever was not given.

    Args:
        project_dir: Project root (git work tree containing pyproject.toml).
        version: Explicit version; derived from git tags or pyproject when None.
        build_time: Explicit timestamp; derived from the clock when None.
        git_commit: Explicit commit; derived from ``git rev-parse`` when None.

    Returns:
        Mapping of stamp field name to value. Fields that could not be
        derived are left out so their sentinel stays in place.
    """
    candidates = {
        "build_version": version or _git(project_dir, "describe", "--tags", "--dirty") or _pyproject_version(project_dir),
        "build_time": build_time or _build_timestamp(),
        "git_commit": git_commit or _git(project_dir, "rev-parse", "HEAD"),
    }
    return {field: value for field, value in candidates.items() if value}


def locate_initconf(project_dir: Path) -> Path:
    """Find ``src/<package>/__init__conf__.py`` using the hatch wheel packages.

    Raises:
        FileNotFoundError: If pyproject.toml or the metadata module is missing.
    """
    data = _load_pyproject(project_dir)
    tool = data.get("tool", {})
    packages = (
        tool.get("hatch", {}).get("build", {}).get("targets", {}).get("wheel", {}).get("packages", [])
        if isinstance(tool, dict)
        else []
    )
    if packages:
        package_dir = project_dir / packages[0]
    else:
        project = data.get("project", {})
        name = project.get("name", "") if isinstance(project, dict) else ""
        package_dir = project_dir / "src" / str(name).replace("-", "_")

    initconf_path = package_dir / "__init__conf__.py"
    if not initconf_path.is_file():
        raise FileNotFoundError(f"Metadata module not found: {initconf_path}")
    return initconf_path


def stamp_build_info(initconf_path: Path, values: dict[str, str]) -> bool:
    """Rewrite the stamp assignments in ``initconf_path``.

    Args:
        initconf_path: Path to ``__init__conf__.py``.
        values: Field name to value; unknown field names are rejected.

    Returns:
        True if the file was updated, False if already up to date.

    Raises:
        ValueError: On unknown fields, values that cannot be embedded in a
            string literal, or a missing assignment in the target file.
    """
    content = initconf_path.read_text(encoding="utf-8")
    new_content = content
    for field, value in values.items():
        if field not in STAMP_FIELDS:
            raise ValueError(f"Unknown stamp field: {field}")
        if any(char in value for char in _FORBIDDEN_CHARS):
            raise ValueError(f"Value for {field} contains quotes, backslashes or newlines: {value!r}")
        pattern = re.compile(rf'^({field}\s*=\s*")[^"]*(")', re.MULTILINE)
        if not pattern.search(new_content):
            raise ValueError(f"No '{field} = \"...\"' assignment in {initconf_path}")
        new_content = pattern.sub(lambda match, v=value: f"{match.group(1)}{v}{match.group(2)}", new_content)

    if new_content == content:
        return False
    initconf_path.write_text(new_content, encoding="utf-8")
    return True


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = argparse.ArgumentParser(description="Stamp build metadata into __init__conf__.py")
    parser.add_argument("--project-dir", type=Path, default=Path.cwd(), help="Project directory")
    parser.add_argument("--version", dest="version", default=None, help="Version to stamp")
    parser.add_argument("--build-time", default=None, help="Build timestamp to stamp")
    parser.add_argument("--git-commit", default=None, help="Commit hash to stamp")
    args = parser.parse_args(argv)

    try:
        initconf_path = locate_initconf(args.project_dir)
        values = collect_build_info(
            args.project_dir,
            version=args.version,
            build_time=args.build_time,
            git_commit=args.git_commit,
        )
        changed = stamp_build_info(initconf_path, values)
    except (ValueError, FileNotFoundError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    for field in STAMP_FIELDS:
        print(f"  {field.ljust(13)} = {values.get(field, '(unchanged)')}")
    print(f"Stamped {initconf_path}" if changed else f"{initconf_path} already up to date")
    return 0


if __name__ == "__main__":
    sys.exit(main())
