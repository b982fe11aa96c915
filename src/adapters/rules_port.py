from src.rules.models import Rules


class RulesAdapter:
    """RulesPort backed by the loaded rules file."""

    def __init__(self, rules: Rules) -> None:
        self._documents = rules.documents

    def get_max_json_bytes(self) -> int:
        return self._documents.max_json_bytes

    def get_log_rejections(self) -> bool:
        return self._documents.log_rejections
