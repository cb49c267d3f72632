"""Failure kinds for a forecast fetch. All of them end in the Error state."""


class FetchError(Exception):
    """Base class for every forecast fetch failure."""


class NetworkError(FetchError):
    """Transport failure: DNS, connection refused, timeout."""


class HttpStatusError(FetchError):
    def __init__(self, status_code: int, url: str = ""):
        self.status_code = status_code
        self.url = url
        super().__init__(f"Provider returned HTTP {status_code} for {url}")


class ParseError(FetchError):
    """Response body is not a JSON object."""


class SchemaError(FetchError):
    """Expected fields are missing, mistyped, or daily arrays are misaligned."""
