"""Package path validation.

A package path names a directory in a hosted repository, e.g.
``github.com/owner/repo`` or ``github.com/owner/repo/pkg/sub``.
"""

import re

SUPPORTED_HOSTS = ("github.com",)

_ELEMENT = re.compile(r"^[A-Za-z0-9_~+\-][A-Za-z0-9._~+\-]*$")


def split_path(path: str) -> list[str]:
    return path.split("/")


def is_valid_path(path: str) -> bool:
    """Return True if *path* is a well-formed path on a supported host."""
    if not path or len(path) > 1024:
        return False
    elements = split_path(path)
    if len(elements) < 3 or elements[0] not in SUPPORTED_HOSTS:
        return False
    # Leading "." also rules out "." and ".." elements.
    return all(_ELEMENT.match(e) for e in elements[1:])
