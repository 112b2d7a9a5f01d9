"""Project name normalization."""

import re

_SEPARATORS = re.compile(r'[^a-z0-9]+')


def normalize_project_name(raw: str) -> str:
    """Normalize a project name to kebab-case.

    Lowercases the input and maps every run of characters outside
    ``[a-z0-9]`` to a single hyphen, with no leading or trailing hyphen.
    The result may be empty.
    """
    return _SEPARATORS.sub('-', raw.strip().lower()).strip('-')
