"""Domain-specific exceptions."""


class ServiceError(Exception):
    pass


class ApiError(ServiceError):
    """Base class for failures reported by the Wikidata API client."""


class HttpError(ApiError):
    def __init__(self, status_code: int) -> None:
        super().__init__(f"Error code: {status_code}")
        self.status_code = status_code


class ParseError(ApiError):
    def __init__(self, message: str, body: str) -> None:
        super().__init__(message)
        self.body = body


class TransportError(ApiError):
    pass


class EmptyResultError(ApiError):
    """The API answered but matched nothing."""


class ClientClosedError(ApiError):
    pass


class ResultNotFoundError(ServiceError, KeyError):
    def __init__(self, identifier: str) -> None:
        super().__init__(identifier)
        self.identifier = identifier

    def __str__(self) -> str:
        return f"No cached result for {self.identifier!r}"


class ProviderNotStartedError(ServiceError):
    pass


class LaunchError(ServiceError):
    pass
