"""Text rendering for the version and help blocks.

Contents:
    * :func:`render_version` - Build metadata block with optional runtime lines.
    * :func:`render_help` - Fixed usage block.
"""

from __future__ import annotations

from .metadata import BuildMetadata, RuntimeInfo


def render_version(metadata: BuildMetadata, runtime: RuntimeInfo | None = None) -> str:
    """Render the version block.

    The version line is always present. Build time and commit lines are
    omitted while they hold the ``unknown`` sentinel. Runtime lines are only
    rendered when ``runtime`` is given.

    Args:
        metadata: Resolved build metadata.
        runtime: Host runtime identifiers, or None to skip them.

    Returns:
        Multi-line text without a trailing newline.

    Example:
        >>> print(render_version(BuildMetadata(version="v1.2.0", git_commit="9f1c2ab")))
        Version: v1.2.0
        Commit: 9f1c2ab
        >>> print(render_version(BuildMetadata(), RuntimeInfo("3.13.1", "linux", "x86_64")))
        Version: dev
        Python version: 3.13.1
        Platform: linux/x86_64
    """
    lines = [f"Version: {metadata.version}"]
    if metadata.has_build_time:
        lines.append(f"Built: {metadata.build_time}")
    if metadata.has_commit:
        lines.append(f"Commit: {metadata.git_commit}")
    if runtime is not None:
        lines.append(f"Python version: {runtime.python_version}")
        lines.append(f"Platform: {runtime.platform}")
    return "\n".join(lines)


def render_help(metadata: BuildMetadata, program: str = "hello") -> str:
    """Render the usage block listing the three supported invocations.

    Example:
        >>> print(render_help(BuildMetadata(version="v1.2.0")))
        Hello World Application
        Version: v1.2.0
        <BLANKLINE>
        Usage:
          hello              Show greeting
          hello version      Show version information
          hello help         Show this help
    """
    usage = [
        (program, "Show greeting"),
        (f"{program} version", "Show version information"),
        (f"{program} help", "Show this help"),
    ]
    width = max(19, *(len(invocation) + 1 for invocation, _ in usage))
    lines = [
        "Hello World Application",
        f"Version: {metadata.version}",
        "",
        "Usage:",
    ]
    lines.extend(f"  {invocation.ljust(width)}{description}" for invocation, description in usage)
    return "\n".join(lines)


__all__ = ["render_help", "render_version"]
