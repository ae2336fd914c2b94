"""
Panel error taxonomy.

Every action raises one of these instead of returning an error value; the
HTTP layer turns them into a status code plus a ``{"message": ...}`` body.
"""


class PanelError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFound(PanelError):
    status_code = 404

    def __init__(self, kind: str, entity_id):
        self.kind = kind
        self.entity_id = entity_id
        super().__init__(f"{kind.capitalize()} not found")


class InsufficientBalance(PanelError):
    status_code = 400

    def __init__(self, required: int, available: int):
        self.required = required
        self.available = available
        super().__init__("Insufficient balance")


class AlreadyOwned(PanelError):
    status_code = 400

    def __init__(self, kind: str, entity_id):
        self.kind = kind
        self.entity_id = entity_id
        super().__init__(f"{kind.capitalize()} already purchased")


class ValidationError(PanelError):
    status_code = 400


class SideEffectFailed(PanelError):
    """The notification after a mutation failed. The mutation is kept."""

    status_code = 500

    def __init__(self, detail: str = None, action: str = None):
        self.detail = detail
        self.action = action
        if action:
            message = f"Failed to {action}: {detail}" if detail else f"Failed to {action}"
        else:
            message = detail or "Side effect failed"
        super().__init__(message)
