"""Run one reviewer assignment for a pull request."""

import logging
from dataclasses import dataclass, field

from .aggregate import ReviewerRequestLists, aggregate, collect_matches
from .errors import RuleFileError
from .resolver import select_strategy
from .rules import parse_rules

logger = logging.getLogger(__name__)

REQUESTED = "requested"
NO_REVIEWERS = "no_reviewers"
SKIPPED_DRAFT = "skipped_draft"


@dataclass
class AssignmentResult:
    outcome: str
    reviewers: ReviewerRequestLists = field(default_factory=ReviewerRequestLists)


def read_rule_file(path: str) -> str:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except OSError as e:
        raise RuleFileError(f"Cannot read rule file {path}: {e.strerror or e}") from e


def assign_reviewers(config, client, read_file=read_rule_file) -> AssignmentResult:
    """Request reviews for the pull request described by ``config``.

    Errors from the rule file, the changed-file listing, the author lookup and the
    review request propagate; a failed team lookup only drops that team.
    """
    config.validate()
    logger.info("Processing PR #%s in %s...", config.pull_number, config.repository)

    text = read_file(config.rule_file)
    rules = parse_rules(text)
    logger.info("Loaded %d rules from %s", len(rules), config.rule_file)

    if config.skip_drafts and client.is_draft():
        logger.info("PR #%s is a draft, not requesting reviewers", config.pull_number)
        return AssignmentResult(SKIPPED_DRAFT)

    changed_files = client.changed_files()
    logger.info("Changed files: %s", ", ".join(changed_files) or "None")

    strategy = select_strategy(config.expand_groups, client.group_members)
    rule_matches = collect_matches(changed_files, rules, strategy)
    for match in rule_matches:
        logger.info("%s → %s", match.path,
                    ", ".join(str(t) for t in match.rule.targets) or "None")

    reviewers = aggregate(rule_matches, client.author())
    if reviewers.empty:
        logger.info("No reviewers to request.")
        return AssignmentResult(NO_REVIEWERS, reviewers)

    logger.info("Requesting individual reviewers: %s", ", ".join(reviewers.individuals) or "None")
    logger.info("Requesting team reviewers: %s", ", ".join(reviewers.groups) or "None")
    client.request_reviewers(reviewers.individuals, reviewers.groups)
    logger.info("Review request created successfully.")
    return AssignmentResult(REQUESTED, reviewers)
