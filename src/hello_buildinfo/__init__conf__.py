"""Static package metadata surfaced to CLI commands and build tooling.

The ``version`` line is kept in sync with ``pyproject.toml`` by release
automation. The ``build_version``, ``build_time`` and ``git_commit`` lines are
rewritten in place by :mod:`hello_buildinfo.makescripts._stamp_build_info`
when a distributable is built; unstamped checkouts keep the sentinel values.
"""

from __future__ import annotations

#: Distribution name declared in ``pyproject.toml``.
name = "hello-buildinfo"
#: Human-readable summary shown in CLI help output.
title = "Hello World Application"
#: Current release version pulled from ``pyproject.toml`` by automation.
version = "1.0.0"
#: Repository homepage presented to users.
homepage = "https://github.com/bitranox/hello-buildinfo"
#: Author attribution surfaced in CLI output.
author = "bitranox"
#: Contact email surfaced in CLI output.
author_email = "bitranox@gmail.com"
#: Console-script name published by the package.
shell_command = "hello"

#: Version stamped at build time (sentinel ``dev`` when unstamped).
build_version = "dev"
#: Build timestamp stamped at build time (sentinel ``unknown`` when unstamped).
build_time = "unknown"
#: Commit hash stamped at build time (sentinel ``unknown`` when unstamped).
git_commit = "unknown"

#: Vendor identifier for lib_layered_config paths (macOS/Windows).
LAYEREDCONF_VENDOR: str = "bitranox"
#: Application name for lib_layered_config paths (macOS/Windows).
LAYEREDCONF_APP: str = "Hello Buildinfo"
#: Slug for lib_layered_config paths (Linux) and environment variable prefix.
LAYEREDCONF_SLUG: str = "hello-buildinfo"


def print_info() -> None:
    """Print the summarised metadata block used by build tooling.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for hello-buildinfo:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("build_version", build_version),
        ("build_time", build_time),
        ("git_commit", git_commit),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))
