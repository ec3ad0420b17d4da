import logging
import sys

from codeowners_reviewers.assign import assign_reviewers
from codeowners_reviewers.config import ActionConfig
from codeowners_reviewers.errors import CodeownersReviewersError
from codeowners_reviewers.github_client import GitHubPullRequestClient

logger = logging.getLogger("codeowners_reviewers")


def setup_logging(level: str):
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(levelname)s %(message)s",
        stream=sys.stdout,
    )


def main(environ=None) -> int:
    try:
        config = ActionConfig.from_env(environ)
        setup_logging(config.log_level)
        config.validate()
        logger.debug("Configuration: %s", config.describe())
        client = GitHubPullRequestClient(config.token, config.repository, config.pull_number)
        assign_reviewers(config, client)
    except CodeownersReviewersError as e:
        setup_logging("INFO")
        logger.error("%s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
