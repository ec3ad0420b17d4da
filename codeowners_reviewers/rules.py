"""Parsing of the ownership rule file.

Each non-comment line reads ``<pattern> @user @org/team ...``. The parser is
lenient: blank lines, comments, lines without a target column and tokens that
are not ``@`` references are skipped rather than reported as errors.
"""

import logging
from dataclasses import dataclass
from typing import Union

logger = logging.getLogger(__name__)

SIGIL = "@"
SEPARATOR = "/"
COMMENT = "#"


@dataclass(frozen=True)
class Individual:
    handle: str

    @property
    def identity(self) -> str:
        return self.handle

    def __str__(self):
        return f"{SIGIL}{self.handle}"


@dataclass(frozen=True)
class Group:
    org: str
    team: str

    @property
    def identity(self) -> str:
        return f"{self.org}{SEPARATOR}{self.team}"

    def __str__(self):
        return f"{SIGIL}{self.identity}"


Target = Union[Individual, Group]


@dataclass(frozen=True)
class Rule:
    pattern: str
    targets: tuple = ()


def parse_target(token: str) -> Target | None:
    """Classify one owner token, returning None for anything that is not a reviewer reference."""
    if not token.startswith(SIGIL):
        return None
    name = token[len(SIGIL):]
    if SEPARATOR in name:
        org, team = name.split(SEPARATOR, 1)
        if not org or not team:
            return None
        return Group(org, team)
    if not name:
        return None
    return Individual(name)


def parse_rules(text: str) -> list[Rule]:
    rules = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        line = line.strip()
        if not line or line.startswith(COMMENT):
            continue
        parts = line.split()
        if len(parts) < 2:
            logger.debug("Skipping line %d without owners: '%s'", lineno, line)
            continue
        pattern, owners = parts[0], parts[1:]
        targets = []
        for owner in owners:
            target = parse_target(owner)
            if target is None:
                logger.debug("Skipping invalid owner '%s' on line %d", owner, lineno)
                continue
            targets.append(target)
        rules.append(Rule(pattern, tuple(targets)))
    return rules
