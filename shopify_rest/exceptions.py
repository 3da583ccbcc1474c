"""
Custom exceptions for the Shopify REST client.

This module defines the exception hierarchy raised by the client:
transport failures, HTTP status errors decoded from Shopify's error
envelope, response decoding failures and rate-limit errors.
"""

from http import HTTPStatus
from typing import Optional, Dict, Any, List, Mapping

from .constants import ErrorMessages, Headers, StatusCodes


class ShopifyError(Exception):
    """
    Base exception class for all Shopify API related errors.

    Attributes:
        message (str): Error message
        status_code (Optional[int]): HTTP status code if applicable
        details (Dict[str, Any]): Additional error details
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.details = details or {}

    def __str__(self):
        error_parts = [f"{self.__class__.__name__}: {self.message}"]

        if self.status_code:
            error_parts.append(f"Status Code: {self.status_code}")

        if self.details:
            error_parts.append(f"Details: {self.details}")

        return " | ".join(error_parts)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/serialization."""
        return {
            "type": self.__class__.__name__,
            "message": self.message,
            "status_code": self.status_code,
            "details": self.details
        }


class NetworkError(ShopifyError):
    """
    Raised when the request never produced an HTTP response.

    This includes connection failures, DNS errors, TLS errors and
    transport timeouts.
    """

    def __init__(self, message: str = "Network error occurred", **kwargs):
        super().__init__(message, **kwargs)


class RequestCancelledError(NetworkError):
    """
    Raised when a request is abandoned because its context was cancelled
    or its deadline passed. The message is either "request cancelled" or
    "deadline exceeded".
    """

    def __init__(self, message: str = ErrorMessages.CANCELLED, **kwargs):
        super().__init__(message, **kwargs)

    @property
    def deadline_exceeded(self) -> bool:
        return self.message == ErrorMessages.DEADLINE_EXCEEDED


class ResponseDecodingError(ShopifyError):
    """
    Raised when a response (or one of its headers) cannot be decoded.

    Attributes:
        body (bytes): Raw response body, if any
    """

    def __init__(self, message: str, body: Optional[bytes] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.body = body or b""


class ResponseError(ShopifyError):
    """
    Raised when Shopify answers with a non-2xx status.

    Attributes:
        errors (List[str]): Individual error messages, field errors rendered
            as "field: message" and sorted
        response_data (Any): Decoded error body, if it was valid JSON
    """

    def __init__(
        self,
        message: str,
        errors: Optional[List[str]] = None,
        response_data: Any = None,
        **kwargs
    ):
        super().__init__(message, **kwargs)
        self.errors = errors or []
        self.response_data = response_data

    def __str__(self):
        base_str = super().__str__()
        if len(self.errors) > 1:
            base_str += f" | Errors: {len(self.errors)}"
        return base_str

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["errors"] = self.errors
        return data


class AuthenticationError(ResponseError):
    """
    Raised when authentication fails or credentials are missing.

    This typically occurs when:
    - The access token is invalid or revoked
    - The app lacks the scope for the endpoint (403)
    - No shop name or credentials were supplied to the client
    """

    def __init__(self, message: str = "Authentication failed", **kwargs):
        super().__init__(message, **kwargs)


class NotFoundError(ResponseError):
    """Raised when the requested resource does not exist."""

    def __init__(self, message: str = "Not Found", **kwargs):
        super().__init__(message, **kwargs)


class ValidationError(ResponseError):
    """
    Raised when Shopify rejects the submitted resource (HTTP 422).

    The field errors are available in `errors` and `field_errors`.
    """

    @property
    def field_errors(self) -> Dict[str, List[str]]:
        fields: Dict[str, List[str]] = {}
        data = self.response_data
        if isinstance(data, dict) and isinstance(data.get("errors"), dict):
            for field, messages in data["errors"].items():
                if isinstance(messages, list):
                    fields[field] = [str(m) for m in messages]
                else:
                    fields[field] = [str(messages)]
        return fields


class RateLimitError(ResponseError):
    """
    Raised when the API call limit is exceeded (HTTP 429).

    Attributes:
        retry_after (float): Seconds to wait before retrying, from the
            Retry-After header
    """

    def __init__(
        self,
        message: str = "Exceeded API call limit",
        retry_after: float = 0,
        **kwargs
    ):
        super().__init__(message, **kwargs)
        self.retry_after = retry_after

    def __str__(self):
        base_str = super().__str__()
        if self.retry_after:
            base_str += f" | Retry After: {self.retry_after:g}s"
        return base_str


class ServerError(ResponseError):
    """Raised on 5xx responses."""


# Exception mapping for HTTP status codes
HTTP_STATUS_TO_EXCEPTION = {
    401: AuthenticationError,
    403: AuthenticationError,
    404: NotFoundError,
    422: ValidationError,
    429: RateLimitError,
}


def status_line(status_code: int, reason: Optional[str] = None) -> str:
    """Render "502 Bad Gateway" style text for a status code."""
    if not reason:
        try:
            reason = HTTPStatus(status_code).phrase
        except ValueError:
            reason = ""
    return f"{status_code} {reason}".strip()


def extract_error_messages(response_data: Any) -> List[str]:
    """
    Pull error messages out of a decoded Shopify error body.

    Shopify uses several shapes:
        {"errors": "Not Found"}
        {"errors": ["first", "second"]}
        {"errors": {"title": ["can't be blank"], "base": "bad"}}
        {"error": "invalid_request"}

    Field maps are rendered as "field: message" and sorted so the result
    does not depend on dict ordering.
    """
    if not isinstance(response_data, dict):
        return []

    errors = response_data.get("errors")
    if isinstance(errors, str):
        return [errors] if errors else []

    if isinstance(errors, list):
        return [str(error) for error in errors]

    if isinstance(errors, dict):
        messages = []
        for field, value in errors.items():
            if isinstance(value, list):
                messages.extend(f"{field}: {item}" for item in value)
            else:
                messages.append(f"{field}: {value}")
        return sorted(messages)

    error = response_data.get("error")
    if error:
        description = response_data.get("error_description")
        return [f"{error}: {description}" if description else str(error)]

    return []


def parse_retry_after(headers: Optional[Mapping[str, str]]) -> float:
    """Seconds from a Retry-After header, 0 when absent or invalid."""
    if not headers:
        return 0.0
    try:
        return float(headers.get(Headers.RETRY_AFTER, "") or 0)
    except ValueError:
        return 0.0


def create_exception_from_response(
    status_code: int,
    response_data: Any = None,
    reason: Optional[str] = None,
    headers: Optional[Mapping[str, str]] = None
) -> ResponseError:
    """
    Create appropriate exception based on HTTP status code and response data.

    Args:
        status_code: HTTP status code
        response_data: Decoded error body, or None when the body was empty
            or not valid JSON
        reason: HTTP reason phrase from the status line
        headers: Response headers, used for Retry-After on 429

    Returns:
        Appropriate ResponseError subclass instance
    """
    errors = extract_error_messages(response_data)
    message = ", ".join(errors)

    if status_code == StatusCodes.NOT_ACCEPTABLE:
        message = ErrorMessages.NOT_ACCEPTABLE
    elif not message:
        message = status_line(status_code, reason)

    if status_code in HTTP_STATUS_TO_EXCEPTION:
        exception_class = HTTP_STATUS_TO_EXCEPTION[status_code]
    elif status_code >= StatusCodes.INTERNAL_SERVER_ERROR:
        exception_class = ServerError
    else:
        exception_class = ResponseError

    if exception_class is RateLimitError:
        return RateLimitError(
            message=message,
            retry_after=parse_retry_after(headers),
            status_code=status_code,
            errors=errors,
            response_data=response_data
        )

    return exception_class(
        message=message,
        status_code=status_code,
        errors=errors,
        response_data=response_data
    )
