"""Errors raised while fetching the directory"""

from student_directory.models.load_state import FailureKind

FAILURE_PREFIX: str = "Failed to fetch students"


class LoadError(Exception):
    """Base class for every failure of a directory fetch"""

    kind: FailureKind

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail: str = detail

    @property
    def message(self) -> str:
        """Human readable summary, suitable for the error view"""
        return f"{FAILURE_PREFIX}: {self.detail}"


class NetworkError(LoadError):
    """The request never got a response (DNS, refused connection, timeout...)"""

    kind = FailureKind.NETWORK

    def __init__(self, detail: str):
        super().__init__(f"network error ({detail})")


class HttpStatusError(LoadError):
    """The server answered with a non-success status"""

    kind = FailureKind.HTTP

    def __init__(self, status_code: int, reason: str = ""):
        label = f"{status_code} {reason}".strip()
        super().__init__(f"server responded with HTTP {label}")
        self.status_code: int = status_code


class DecodeError(LoadError):
    """The body could not be read as a list of records"""

    kind = FailureKind.DECODE

    def __init__(self, detail: str):
        super().__init__(f"unexpected response body ({detail})")


class UnexpectedError(LoadError):
    """Anything the source raised that is not one of the errors above"""

    kind = FailureKind.UNEXPECTED

    def __init__(self, cause: BaseException):
        super().__init__(f"unexpected error ({type(cause).__name__})")
        self.__cause__ = cause
