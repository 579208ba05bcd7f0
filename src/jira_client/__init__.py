import json
import logging
import os
import sys
from itertools import islice

import click
from dotenv import load_dotenv

from jira_client.exceptions import JiraClientError
from jira_client.jira import JiraFetcher
from jira_client.jira.constants import DEFAULT_READ_JIRA_FIELDS
from jira_client.utils.logging import setup_logging

__version__ = "0.1.0"

# Handlers are only installed by the command line entry point
logger = logging.getLogger("jira-client")


def _default_logging_level() -> int:
    if os.getenv("JIRA_CLIENT_VERBOSE", "").lower() in ("true", "1", "yes"):
        return logging.DEBUG
    return logging.WARNING


def _echo_json(data: object) -> None:
    click.echo(json.dumps(data, indent=2, ensure_ascii=False))


def _fetcher() -> JiraFetcher:
    try:
        return JiraFetcher()
    except (ValueError, JiraClientError) as e:
        logger.error(f"Could not configure the Jira client: {e}")
        sys.exit(1)


@click.group()
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Increase verbosity (can be used multiple times)",
)
@click.option(
    "--env-file", type=click.Path(exists=True, dir_okay=False), help="Path to .env file"
)
@click.version_option(__version__, prog_name="jira-client")
def main(verbose: int, env_file: str | None) -> None:
    """Jira Client - read and search Jira from the command line

    Supports both Atlassian Cloud and Jira Server/Data Center deployments.
    Connection settings are read from JIRA_* environment variables:
    - JIRA_URL, JIRA_USERNAME and JIRA_API_TOKEN (Cloud or Server basic auth)
    - JIRA_PERSONAL_TOKEN (Server/Data Center)
    """
    # Logging level logic
    if verbose == 1:
        current_logging_level = logging.INFO
    elif verbose >= 2:  # -vv or more
        current_logging_level = logging.DEBUG
    else:
        current_logging_level = _default_logging_level()

    setup_logging(current_logging_level)
    logger.debug(f"Logging level set to: {logging.getLevelName(current_logging_level)}")

    if env_file:
        logger.debug(f"Loading environment from file: {env_file}")
        load_dotenv(env_file, override=True)
    else:
        logger.debug(
            "Attempting to load environment from default .env file if it exists"
        )
        load_dotenv(override=True)


@main.command()
@click.argument("issue_key")
@click.option("--fields", help="Comma-separated list of fields to return")
@click.option("--expand", help="Comma-separated list of items to expand")
def issue(issue_key: str, fields: str | None, expand: str | None) -> None:
    """Print a single issue as JSON."""
    jira = _fetcher()
    try:
        result = jira.get_issue(issue_key, fields=fields, expand=expand)
    except JiraClientError as e:
        logger.error(str(e))
        sys.exit(1)
    _echo_json(result.to_simplified_dict())


@main.command()
@click.argument("jql")
@click.option("--fields", help="Comma-separated list of fields to return")
@click.option(
    "--limit", default=50, show_default=True, help="Maximum number of issues to print"
)
@click.option("--count", "count_only", is_flag=True, help="Only print the match count")
def search(jql: str, fields: str | None, limit: int, count_only: bool) -> None:
    """Print the issues matching a JQL query as JSON."""
    jira = _fetcher()
    try:
        if count_only:
            _echo_json({"total": jira.count_issues(jql)})
            return
        issues = jira.iter_issues(
            jql,
            fields=fields or DEFAULT_READ_JIRA_FIELDS,
            max_results=min(limit, 100),
        )
        _echo_json([item.to_simplified_dict() for item in islice(issues, limit)])
    except JiraClientError as e:
        logger.error(str(e))
        sys.exit(1)


@main.command()
def projects() -> None:
    """Print every project visible to the current user."""
    jira = _fetcher()
    try:
        result = jira.get_all_projects()
    except JiraClientError as e:
        logger.error(str(e))
        sys.exit(1)
    _echo_json([project.to_simplified_dict() for project in result])


__all__ = ["main", "__version__"]

if __name__ == "__main__":
    main()
