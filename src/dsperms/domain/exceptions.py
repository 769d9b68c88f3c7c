"""Domain exceptions."""


class DsPermsError(Exception):
    """Base exception for dsperms."""

    pass


class NotFound(DsPermsError):
    """Requested resource was not found."""

    pass


class ValidationError(DsPermsError):
    """Validation failed for input data."""

    pass


class InvalidPermissionSymbol(ValidationError):
    """Permission name has no wire code."""

    def __init__(self, symbol: str) -> None:
        super().__init__(f"Invalid permission {symbol!r}")
        self.symbol = symbol


class RemoteAPIError(DsPermsError):
    """Remote API answered with an error status."""

    def __init__(self, status_code: int, body: str = "") -> None:
        super().__init__(f"status: {status_code}, body: {body}")
        self.status_code = status_code
        self.body = body


class DatasourceNotFound(RemoteAPIError, NotFound):
    """Datasource no longer exists on the remote server."""

    def __init__(self, body: str = "") -> None:
        super().__init__(404, body)


def is_not_found(error: BaseException) -> bool:
    """True when a remote call failed because the resource is gone."""
    return isinstance(error, RemoteAPIError) and error.status_code == 404
