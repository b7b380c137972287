from uuid import UUID


class ConsoleError(Exception):
    """Base class for console errors."""


class RequestNotFound(ConsoleError, LookupError):
    def __init__(self, request_id: UUID):
        super().__init__(f"Request not found: {request_id}")
        self.request_id = request_id


class InvalidTransition(ConsoleError, ValueError):
    def __init__(self, current_status, action: str):
        super().__init__(f"Cannot {action} a request that is {current_status.value}")
        self.current_status = current_status
        self.action = action


class CatalogError(ConsoleError):
    """Raised when the resident catalog cannot be loaded."""
