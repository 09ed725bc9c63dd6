import logging
import os
import sys

from src.rules.models import Rules

logger = logging.getLogger(__name__)


def missing_required_env(rules: Rules) -> list[str]:
    return [name for name in rules.ops.required_env if name not in os.environ]


def validate_ops_rules(rules: Rules) -> None:
    """
    Validate operational requirements before startup.
    Exits the process when required environment variables are missing.
    """
    missing = missing_required_env(rules)
    if missing:
        logger.critical("Missing required environment variables: %s", ", ".join(missing))
        sys.exit(1)

    numbering = rules.inspection_numbering
    if numbering.restrict_stations and not numbering.stations:
        logger.warning("restrict_stations is enabled but no stations are configured")

    logger.info(
        "Configuration validated (week_start_day=%d, strict_week_numbers=%s)",
        rules.fiscal.week_start_day,
        rules.fiscal.strict_week_numbers,
    )
