"""Request pull-request reviewers from CODEOWNERS-style ownership rules."""

__version__ = "1.0.0"

from .aggregate import ReviewerRequestLists, RuleMatch, aggregate, collect_matches
from .assign import AssignmentResult, assign_reviewers
from .config import ActionConfig
from .errors import (
    CodeownersReviewersError,
    ConfigurationError,
    RemoteCallError,
    RuleFileError,
)
from .resolver import ExpandGroups, PassThroughGroups, resolve, select_strategy
from .rules import Group, Individual, Rule, parse_rules

__all__ = [
    "ActionConfig",
    "AssignmentResult",
    "CodeownersReviewersError",
    "ConfigurationError",
    "ExpandGroups",
    "Group",
    "Individual",
    "PassThroughGroups",
    "RemoteCallError",
    "ReviewerRequestLists",
    "Rule",
    "RuleFileError",
    "RuleMatch",
    "aggregate",
    "assign_reviewers",
    "collect_matches",
    "parse_rules",
    "resolve",
    "select_strategy",
]
