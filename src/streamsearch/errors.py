class StreamSearchError(Exception):
    pass


class MissingCredentialError(StreamSearchError):
    """Raised when a required credential is not set in the environment."""


class ResponseDecodeError(StreamSearchError):
    """Raised when a response body is not JSON or a required field is missing or mistyped."""


class NoDataError(StreamSearchError):
    """Raised when a listing response has no `data` array. Not a failure, there is just nothing to show."""
