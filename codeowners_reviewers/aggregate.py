import logging
from dataclasses import dataclass, field

from .matcher import matches
from .resolver import resolve
from .rules import Group, Rule

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RuleMatch:
    """A rule that matched a changed file, with the reviewers it resolved to."""
    path: str
    rule: Rule
    reviewers: tuple = ()


@dataclass
class ReviewerRequestLists:
    """Users and team slugs to request, in first-seen order.

    The order only matters for log output; compare the lists as sets.
    """
    individuals: list = field(default_factory=list)
    groups: list = field(default_factory=list)

    @property
    def empty(self) -> bool:
        return not self.individuals and not self.groups


def collect_matches(changed_files, rules, strategy) -> list[RuleMatch]:
    """Evaluate every rule against every changed file and resolve the ones that match.

    All matching rules contribute; a later rule does not override an earlier one.
    """
    found = []
    for path in changed_files:
        for rule in rules:
            if not matches(rule.pattern, path):
                continue
            reviewers = tuple(resolve(rule, strategy))
            logger.debug("%s matches '%s' -> %s", path, rule.pattern,
                         ", ".join(str(r) for r in reviewers) or "None")
            found.append(RuleMatch(path, rule, reviewers))
    return found


def aggregate(rule_matches, author: str | None) -> ReviewerRequestLists:
    """Merge matched reviewers into the users and team slugs to request.

    The author is never requested, as a user or as a slug. A slug that equals a
    requested user's handle is dropped so the two lists never share a name.
    """
    # GitHub logins and team slugs are case-insensitive.
    seen = set()
    unique = []
    for match in rule_matches:
        for reviewer in match.reviewers:
            key = reviewer.identity.casefold()
            if key in seen:
                continue
            seen.add(key)
            unique.append(reviewer)

    excluded = author.casefold() if author else None
    result = ReviewerRequestLists()
    taken = set()
    for reviewer in unique:
        if isinstance(reviewer, Group):
            continue
        if reviewer.handle.casefold() == excluded:
            logger.info("Not requesting a review from the author %s", reviewer.handle)
            continue
        taken.add(reviewer.handle.casefold())
        result.individuals.append(reviewer.handle)

    for reviewer in unique:
        if not isinstance(reviewer, Group):
            continue
        key = reviewer.team.casefold()
        if key == excluded:
            logger.info("Not requesting team %s, it has the author's name", reviewer)
            continue
        if key in taken:
            continue
        taken.add(key)
        result.groups.append(reviewer.team)
    return result
