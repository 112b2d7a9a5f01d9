"""Substitution rules applied to generated project files."""

import re

from pydantic import BaseModel, ConfigDict


def _escape_pattern(text: str) -> str:
    """Escape text for use as a literal in a sed basic regular expression."""
    return re.sub(r'([\\.*\[\]^$|])', r'\\\1', text)


def _escape_replacement(text: str) -> str:
    """Escape text for use in a sed replacement using '|' as delimiter."""
    return re.sub(r'([\\&|])', r'\\\1', text)


class SubstitutionRule(BaseModel):
    """One line-editor substitution, applied in declared order.

    ``pattern`` and ``replacement`` are sed syntax for an ``s|...|...|``
    command; use the constructors below to get correctly escaped rules.
    """

    model_config = ConfigDict(frozen=True)

    pattern: str
    replacement: str
    description: str = ""

    @classmethod
    def env_key(cls, key: str, value: str) -> 'SubstitutionRule':
        """Set ``KEY=value`` whether the key line is commented out or not."""
        return cls(
            pattern=f"^#\\? *{_escape_pattern(key)}=.*$",
            replacement=_escape_replacement(f"{key}={value}"),
            description=f"set {key}",
        )

    def to_sed(self) -> str:
        """Render the rule as a sed script."""
        return f"s|{self.pattern}|{self.replacement}|"

    def __str__(self) -> str:
        return self.description or self.to_sed()
