"""Exception hierarchy for malapi.

Every error raised by the library derives from :class:`MalApiError` so callers
can catch the whole family at once, or pick a branch:

- ValidationError: a query builder rejected its inputs. Always raised before
  any network call is made.
- CredentialError: credentials are missing, unusable for the endpoint, or the
  OAuth2 token exchange failed.
- TransportError: the HTTP request never produced a response.
- ApiError: MyAnimeList answered with a non-2xx status.
- DeserializationError: the response body did not match the expected shape.
- PaginationError: the requested adjacent page does not exist.
"""

from collections.abc import Iterable


class MalApiError(Exception):
    """Base class for all malapi errors."""


class ValidationError(MalApiError):
    """Raised when a query builder cannot produce a valid query."""


class InvalidFieldError(ValidationError):
    """Raised when a requested field is not valid for the endpoint's resource."""

    def __init__(self, field: str, resource: str) -> None:
        """Initialize the error with the offending field token."""
        super().__init__(f"'{field}' is not a valid {resource} field")
        self.field = field
        self.resource = resource


class OutOfRangeError(ValidationError):
    """Raised when a numeric parameter falls outside its inclusive bounds."""

    def __init__(
        self, name: str, value: int, lower: int, upper: int | None = None
    ) -> None:
        """Initialize the error with the parameter name, value and bounds."""
        if upper is None:
            bounds = f"greater than or equal to {lower}"
        else:
            bounds = f"within [{lower}, {upper}]"
        super().__init__(f"{name} must be {bounds}, got {value}")
        self.name = name
        self.value = value
        self.lower = lower
        self.upper = upper


class ConflictingParametersError(ValidationError):
    """Raised when mutually exclusive parameters are set together."""

    def __init__(self, names: Iterable[str]) -> None:
        """Initialize the error with the conflicting parameter names."""
        self.names = tuple(names)
        super().__init__(
            f"Parameters cannot be combined: {', '.join(self.names)}"
        )


class MissingParameterError(ValidationError):
    """Raised when none of a required group of parameters was set."""

    def __init__(self, names: Iterable[str]) -> None:
        """Initialize the error with the parameter names of the group."""
        self.names = tuple(names)
        super().__init__(
            f"At least one of these parameters must be set: {', '.join(self.names)}"
        )


class InvalidArgumentError(ValidationError):
    """Raised when a builder argument has the wrong type or an empty value."""


class AlreadyFinalizedError(ValidationError):
    """Raised when a builder is used again after ``build()``."""


class CredentialError(MalApiError):
    """Base class for credential and token problems."""


class MissingCredentialError(CredentialError):
    """Raised when a required credential is unset or empty."""

    def __init__(self, key: str) -> None:
        """Initialize the error with the missing credential name."""
        super().__init__(f"Missing required credential: {key}")
        self.key = key


class TokenExchangeError(CredentialError):
    """Raised when the OAuth2 code or refresh exchange fails."""


class AuthenticationRequiredError(CredentialError):
    """Raised when an endpoint needs an OAuth2 access token but only a client ID is set."""


class TransportError(MalApiError):
    """Raised when the request failed before any response arrived."""


class ApiError(MalApiError):
    """Raised when MyAnimeList responds with a non-2xx status code."""

    def __init__(self, status_code: int, message: str | None = None) -> None:
        """Initialize the error with the HTTP status and server message."""
        text = f"MyAnimeList returned HTTP {status_code}"
        if message:
            text = f"{text}: {message}"
        super().__init__(text)
        self.status_code = status_code
        self.message = message


class DeserializationError(MalApiError):
    """Raised when a response body cannot be parsed into the expected model."""


class PaginationError(MalApiError):
    """Base class for pagination failures."""


class NoSuchPageError(PaginationError):
    """Raised when the requested paging link is absent from a response."""


class FeatureDisabledError(MalApiError):
    """Raised when a client is created for a disabled endpoint group."""

    def __init__(self, feature: str) -> None:
        """Initialize the error with the disabled feature name."""
        super().__init__(f"The '{feature}' endpoint group is disabled")
        self.feature = feature
