"""
Application error taxonomy.

Every business failure is an AppError with one of six kinds; `internal`
only labels unexpected exceptions caught at the API edge. Use cases
return them through libs.result; storage failures travel as exceptions
carrying the same AppError so the API layer maps both the same way.
"""

from enum import Enum

from libs.result import Error


class ErrorKind(str, Enum):
    unauthenticated = "unauthenticated"
    forbidden = "forbidden"
    bad_request = "bad_request"
    conflict = "conflict"
    not_found = "not_found"
    upstream = "upstream"
    internal = "internal"


class AppError(Error):
    def __init__(self, kind: ErrorKind, code: str, message: str):
        super().__init__(code, message)
        self.kind = kind

    def __repr__(self) -> str:
        return f"AppError(kind={self.kind.value!r}, code={self.code!r}, message={self.message!r})"


def unauthenticated(code: str, message: str) -> AppError:
    return AppError(ErrorKind.unauthenticated, code, message)


def forbidden(code: str, message: str) -> AppError:
    return AppError(ErrorKind.forbidden, code, message)


def bad_request(code: str, message: str) -> AppError:
    return AppError(ErrorKind.bad_request, code, message)


def conflict(code: str, message: str) -> AppError:
    return AppError(ErrorKind.conflict, code, message)


def not_found(code: str, message: str) -> AppError:
    return AppError(ErrorKind.not_found, code, message)


def upstream(code: str, message: str) -> AppError:
    return AppError(ErrorKind.upstream, code, message)


def kind_of(error: Error) -> ErrorKind:
    """Plain Errors without a kind are treated as bad requests"""
    return getattr(error, "kind", ErrorKind.bad_request)


class StorageError(Exception):
    """Raised by storage adapters; carries the AppError to report"""

    def __init__(self, error: AppError):
        self.error = error
        super().__init__(error.message)


class UpstreamError(StorageError):
    def __init__(self, message: str = "Storage backend unavailable"):
        super().__init__(upstream("UPSTREAM_FAILURE", message))


class DuplicateRecordError(StorageError):
    def __init__(self, message: str = "Record already exists"):
        super().__init__(conflict("DUPLICATE_RECORD", message))
