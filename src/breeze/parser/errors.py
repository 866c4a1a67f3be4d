"""Resolution error type."""

from breeze.model.diagnostic import WarningType


class ResolutionError(Exception):
    """Raised when a class token structurally matched but cannot be resolved."""

    def __init__(self, warning_type: WarningType) -> None:
        self.warning_type = warning_type
        super().__init__(f"{warning_type.kind.value}: {warning_type!r}")
