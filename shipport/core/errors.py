"""
Errors raised by the vessel registry and nearest-port resolver.

Every error is recoverable: the caller corrects the request and retries.
"""


class ShipPortError(Exception):
    """Base class for registry and resolution errors."""
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInputError(ShipPortError):
    """Empty name, or zero velocity/latitude/longitude."""
    status_code = 400


class ConflictError(ShipPortError):
    """Duplicate id on add/update, or removal of an absent vessel."""
    status_code = 409


class NotFoundError(ShipPortError):
    """Unknown vessel id on lookup, update or resolution."""
    status_code = 404
