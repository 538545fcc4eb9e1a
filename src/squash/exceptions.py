# ABOUTME: Closed taxonomy of error kinds reported by squash and the SquashError carrier
# ABOUTME: Maps every error kind to the FinalMessage shown to the user
"""Error kinds for squash"""

from dataclasses import dataclass
from typing import Union, assert_never

from squash.messages import FinalMessage, render_message


@dataclass(frozen=True)
class IoError:
    """An OSError not filtered into one of the more specific kinds"""

    reason: str


@dataclass(frozen=True)
class Lz4Error:
    """Failure reported by the LZ4 frame codec"""

    reason: str


@dataclass(frozen=True)
class WalkdirError:
    """Directory traversal failure, including the offending path"""

    reason: str


@dataclass(frozen=True)
class NotFound:
    error_title: str


@dataclass(frozen=True)
class AlreadyExists:
    error_title: str


@dataclass(frozen=True)
class PermissionDenied:
    error_title: str


@dataclass(frozen=True)
class InvalidZipArchive:
    """Corrupt or truncated zip archive"""

    code: str


@dataclass(frozen=True)
class UnsupportedZipArchive:
    """Zip feature the reader does not handle (compression method, encryption, zip64)"""

    code: str


@dataclass(frozen=True)
class CompressingRootFolder:
    """Refusal to compress a filesystem root in memory"""


@dataclass(frozen=True)
class Custom:
    """One-off errors built explicitly at the call site"""

    reason: FinalMessage


ErrorKind = Union[
    IoError,
    Lz4Error,
    WalkdirError,
    NotFound,
    AlreadyExists,
    PermissionDenied,
    InvalidZipArchive,
    UnsupportedZipArchive,
    CompressingRootFolder,
    Custom,
]


def to_final_message(kind: ErrorKind) -> FinalMessage:
    """Resolve an error kind to the message shown to the user."""
    match kind:
        case WalkdirError(reason=reason):
            return FinalMessage.with_title(reason)
        case NotFound(error_title=title):
            return FinalMessage.with_title(title).detail("File not found")
        case CompressingRootFolder():
            return (
                FinalMessage.with_title("It seems you're trying to compress the root folder.")
                .detail("This is unadvisable since squash does compressions in-memory.")
                .hint("Use a more appropriate tool for this, such as rsync.")
            )
        case IoError(reason=reason):
            return FinalMessage.with_title(reason)
        case Lz4Error(reason=reason):
            return FinalMessage.with_title(reason)
        case AlreadyExists(error_title=title):
            return FinalMessage.with_title(title).detail("File already exists")
        case InvalidZipArchive(code=code):
            return FinalMessage.with_title("Invalid zip archive").detail(code)
        case PermissionDenied(error_title=title):
            return FinalMessage.with_title(title).detail("Permission denied")
        case UnsupportedZipArchive(code=code):
            return FinalMessage.with_title("Unsupported zip archive").detail(code)
        case Custom(reason=message):
            return message
        case _:
            assert_never(kind)


class SquashError(Exception):
    """
    Exception carrying one ErrorKind up to the command-line boundary.

    The kind is set once at the point of failure and never changed.
    """

    def __init__(self, kind: ErrorKind):
        super().__init__(kind)
        self.kind = kind

    @classmethod
    def from_message(cls, message: FinalMessage) -> "SquashError":
        return cls(Custom(reason=message))

    def final_message(self) -> FinalMessage:
        return to_final_message(self.kind)

    def render(self, accessible: bool | None = None, color: bool | None = None) -> str:
        return render_message(self.final_message(), accessible=accessible, color=color)

    def __str__(self):
        # No colour: this text ends up in logs and tracebacks
        return self.render(color=False)


def render(
    error: "SquashError | ErrorKind | FinalMessage",
    accessible: bool | None = None,
    color: bool | None = None,
) -> str:
    """
    Render any reportable value to display text.

    Args:
        error: SquashError, bare ErrorKind, or FinalMessage
        accessible: Accessible mode; None reads the process-wide flag
        color: Use ANSI colour; None detects it for stderr
    """
    if isinstance(error, SquashError):
        message = error.final_message()
    elif isinstance(error, FinalMessage):
        message = error
    else:
        message = to_final_message(error)
    return render_message(message, accessible=accessible, color=color)
