from pathlib import Path

import yaml
from pydantic import ValidationError

from src.rules.models import Rules

FENCE_OPEN = "```yaml"
FENCE_CLOSE = "```"


def extract_yaml(content: str) -> str:
    """Return the first ```yaml block of a markdown file, or the whole content."""
    lines = content.splitlines()
    starts = [i for i, line in enumerate(lines) if line.strip().startswith(FENCE_OPEN)]
    if not starts:
        return content

    block = []
    for line in lines[starts[0] + 1 :]:
        if line.strip().startswith(FENCE_CLOSE):
            break
        block.append(line)
    return "\n".join(block)


def load_rules(path: Path) -> Rules:
    """
    Load and validate the rules file.
    Raises FileNotFoundError if file missing.
    Raises ValueError if YAML or schema invalid.
    """
    if not path.exists():
        raise FileNotFoundError(f"Rules file not found at: {path}")

    try:
        data = yaml.safe_load(extract_yaml(path.read_text()))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in rules file: {e}") from e

    try:
        return Rules.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Rules validation failed:\n{e}") from e
