"""Turn a matched rule's targets into reviewer identities.

Individuals always resolve to themselves. Groups go through one of two
strategies picked once per run: ``PassThroughGroups`` requests the team as a
team, ``ExpandGroups`` asks GitHub for the team's members and requests each of
them individually.
"""

import logging
from typing import Callable

from .errors import RemoteCallError
from .rules import Group, Individual, Rule

logger = logging.getLogger(__name__)

GroupLookup = Callable[[str, str], list]


class PassThroughGroups:
    expands = False

    def resolve_group(self, group: Group) -> list:
        return [group]


class ExpandGroups:
    expands = True

    def __init__(self, lookup: GroupLookup):
        self._lookup = lookup
        self._members = {}

    def resolve_group(self, group: Group) -> list:
        if group not in self._members:
            self._members[group] = self._fetch(group)
        return [Individual(login) for login in self._members[group]]

    def _fetch(self, group: Group) -> list:
        try:
            members = list(self._lookup(group.org, group.team))
        except RemoteCallError as e:
            logger.warning("Could not get members of team %s, skipping it: %s", group, e)
            return []
        logger.info("Team %s has members: %s", group, ", ".join(members) or "None")
        return members


def select_strategy(expand_groups: bool, lookup: GroupLookup | None = None):
    if not expand_groups:
        return PassThroughGroups()
    if lookup is None:
        raise ValueError("Expanding teams requires a member lookup")
    return ExpandGroups(lookup)


def resolve(rule: Rule, strategy) -> list:
    resolved = []
    for target in rule.targets:
        if isinstance(target, Group):
            resolved.extend(strategy.resolve_group(target))
        else:
            resolved.append(target)
    return resolved
