"""Action inputs, read from the GitHub Actions environment."""

import json
import logging
import os
from dataclasses import dataclass

from .errors import ConfigurationError

logger = logging.getLogger(__name__)

_TRUE = {"true", "yes", "1"}
_FALSE = {"false", "no", "0"}
_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def parse_bool(name: str, value: str | None, default: bool) -> bool:
    if value is None or value.strip() == "":
        return default
    lowered = value.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise ConfigurationError(f"Input '{name}' must be true or false, got '{value}'")


def read_pull_number(event_path: str | None) -> int | None:
    """Return the pull request number from the webhook payload, if there is one."""
    if not event_path:
        return None
    try:
        with open(event_path, "r", encoding="utf-8") as f:
            event = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Cannot read GitHub event file {event_path}: {e}") from e
    if not isinstance(event, dict):
        raise ConfigurationError(f"GitHub event file {event_path} does not hold a JSON object")
    pull_request = event.get("pull_request")
    number = pull_request.get("number") if isinstance(pull_request, dict) else None
    try:
        return int(number) if number is not None else None
    except (TypeError, ValueError):
        return None


@dataclass
class ActionConfig:
    token: str | None = None
    rule_file: str | None = None
    repository: str | None = None
    pull_number: int | None = None
    expand_groups: bool = True
    skip_drafts: bool = True
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ=None) -> "ActionConfig":
        env = os.environ if environ is None else environ
        if env.get("RUNNER_DEBUG") == "1":
            log_level = "DEBUG"
        else:
            log_level = (env.get("INPUT_LOG_LEVEL") or "INFO").upper()
        return cls(
            token=env.get("INPUT_TOKEN") or env.get("GITHUB_TOKEN"),
            rule_file=env.get("INPUT_FILE"),
            repository=env.get("GITHUB_REPOSITORY"),
            pull_number=read_pull_number(env.get("GITHUB_EVENT_PATH")),
            expand_groups=parse_bool("expand_groups", env.get("INPUT_EXPAND_GROUPS"), True),
            skip_drafts=parse_bool("skip_drafts", env.get("INPUT_SKIP_DRAFTS"), True),
            log_level=log_level,
        )

    def validate(self) -> None:
        errors = []
        if not self.token:
            errors.append('Required input "token" not provided')
        if not self.rule_file:
            errors.append('Required input "file" not provided')
        if not self.repository or "/" not in self.repository:
            errors.append("Valid owner/repo is missing from context")
        if not self.pull_number or self.pull_number <= 0:
            errors.append("Valid pull request number is missing from context")
        if self.log_level.upper() not in _LOG_LEVELS:
            errors.append(f"Invalid log level: {self.log_level}")
        if errors:
            raise ConfigurationError("; ".join(errors))

    def describe(self) -> str:
        return (f"repository={self.repository} pull={self.pull_number} "
                f"file={self.rule_file} expand_groups={self.expand_groups} "
                f"skip_drafts={self.skip_drafts}")
