"""Static package metadata surfaced to CLI commands and documentation.

Values mirror ``[project]`` in ``pyproject.toml``; ``tests/test_metadata.py``
checks that the two agree.
"""

from __future__ import annotations

from typing import Final

#: Distribution name.
name: Final[str] = "helloworld"
#: One-line description, also the root command's help text.
title: Final[str] = "Time-aware greetings and world facts from the command line"
#: Distribution version.
version: Final[str] = "1.0.0"
#: Project homepage.
homepage: Final[str] = "https://github.com/helloworld-example/helloworld"
#: Maintainer.
author: Final[str] = "HelloWorld Example Project"
#: Maintainer contact.
author_email: Final[str] = "maintainers@helloworld.invalid"
#: Console script name.
shell_command: Final[str] = "helloworld"

#: Vendor directory segment used by lib_layered_config on macOS and Windows.
LAYEREDCONF_VENDOR: Final[str] = "helloworld-example"
#: Application directory segment used by lib_layered_config on macOS and Windows.
LAYEREDCONF_APP: Final[str] = "helloworld"
#: Slug used for XDG paths and environment variable prefixes on Linux.
LAYEREDCONF_SLUG: Final[str] = "helloworld"


def print_info() -> None:
    """Print the summarised metadata block.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for helloworld:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))


__all__ = [
    "LAYEREDCONF_APP",
    "LAYEREDCONF_SLUG",
    "LAYEREDCONF_VENDOR",
    "author",
    "author_email",
    "homepage",
    "name",
    "print_info",
    "shell_command",
    "title",
    "version",
]
