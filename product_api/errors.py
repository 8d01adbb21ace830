from typing import Dict, List


class ProductNotFound(Exception):
    """No product row matches the requested key."""

    def __init__(self, key):
        super().__init__(f"Product not found: {key}")
        self.key = key


class ProductValidationError(Exception):
    """One or more field constraints failed.

    ``violations`` maps a field name (or ``"<index>.<field>"`` for batch
    input) to the list of messages for that field.
    """

    def __init__(self, violations: Dict[str, List[str]]):
        super().__init__("Validation failed")
        self.violations = violations
