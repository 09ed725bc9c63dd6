import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from src.rules.models import Rules

logger = logging.getLogger(__name__)


def _extract_yaml(content: str) -> str:
    """
    Return the first ```yaml fenced block, or the whole text when unfenced.
    """
    block: list[str] = []
    in_block = False

    for line in content.splitlines():
        stripped = line.strip()
        if stripped.startswith("```yaml"):
            in_block = True
            continue
        if in_block and stripped.startswith("```"):
            return "\n".join(block)
        if in_block:
            block.append(line)

    if in_block:
        # Unterminated fence: take everything after it
        return "\n".join(block)
    return content


def load_rules(path: Path) -> Rules:
    """
    Load and validate the rules file.
    Raises FileNotFoundError if file missing.
    Raises ValueError if YAML or schema invalid.
    """
    if not path.exists():
        raise FileNotFoundError(f"Rules file not found at: {path}")

    with open(path) as f:
        content = f.read()

    try:
        data = yaml.safe_load(_extract_yaml(content))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in rules file: {e}") from e

    try:
        rules = Rules.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Rules validation failed:\n{e}") from e

    logger.debug(
        "Loaded rules %s (week_start_day=%d)", rules.project.rules_version, rules.fiscal.week_start_day
    )
    return rules
