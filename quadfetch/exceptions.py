
"""
Error types raised by the fetch / decode pipeline.  Everything derives
from FetchError so callers can catch the whole family in one place.
"""

class FetchError(Exception):
    pass

class InvalidArgumentError(FetchError, TypeError):
    pass

class UnsupportedSchemeError(FetchError):

    def __init__(self, url, scheme):
        super(UnsupportedSchemeError, self).__init__(
            f"Unsupported URL scheme '{scheme}' in {url}. "
            "Supported schemes: file, http, https"
        )
        self.url = url
        self.scheme = scheme

class AcquisitionError(FetchError):

    def __init__(self, url, cause=None, status=None):

        if status is not None:
            message = f"Fetching {url} failed with HTTP status {status}"
        elif cause is not None:
            message = f"Fetching {url} failed: {cause}"
        else:
            message = f"Fetching {url} failed"

        super(AcquisitionError, self).__init__(message)
        self.url = url
        self.cause = cause
        self.status = status

class UnresolvedFormatError(FetchError):

    def __init__(self, url):
        super(UnresolvedFormatError, self).__init__(
            f"Could not determine a content type for {url}"
        )
        self.url = url

class UnsupportedFormatError(FetchError):

    def __init__(self, content_type, supported=()):
        message = f"No decoder registered for content type: {content_type}"
        if supported:
            message += ". Supported types: " + ", ".join(sorted(supported))
        super(UnsupportedFormatError, self).__init__(message)
        self.content_type = content_type

class DecodeError(FetchError):

    def __init__(self, content_type, diagnostic):
        super(DecodeError, self).__init__(
            f"Could not decode {content_type} content: {diagnostic}"
        )
        self.content_type = content_type
        self.diagnostic = diagnostic

