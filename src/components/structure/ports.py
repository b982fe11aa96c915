"""
Structure component port definitions.
"""

from __future__ import annotations

from typing import Protocol


class RulesPort(Protocol):
    """Port for accessing document validation rules."""

    def get_max_json_bytes(self) -> int:
        """Get maximum JSON document size."""
        ...

    def get_log_rejections(self) -> bool:
        """Whether rejected documents are logged."""
        ...
