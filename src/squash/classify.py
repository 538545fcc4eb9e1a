# ABOUTME: Classification of foreign failures (OS, LZ4, zip, directory walk) into error kinds
# ABOUTME: Context managers re-raise those failures as SquashError at the call site
"""Classify errors from lower-level libraries into squash error kinds"""

import logging
import os
import zipfile
import zlib
from contextlib import contextmanager

from squash.exceptions import (
    AlreadyExists,
    Custom,
    ErrorKind,
    InvalidZipArchive,
    IoError,
    Lz4Error,
    NotFound,
    PermissionDenied,
    SquashError,
    UnsupportedZipArchive,
    WalkdirError,
)
from squash.messages import FinalMessage
from squash.walk import WalkError

logger = logging.getLogger(__name__)

# Corrupt or truncated archive data
_INVALID_ZIP_ERRORS = (zipfile.BadZipFile, zlib.error, EOFError)
# Valid archive using a feature zipfile cannot read or write
_UNSUPPORTED_ZIP_ERRORS = (zipfile.LargeZipFile, NotImplementedError, RuntimeError)
# Failures classify() accepts without knowing which library raised them
CLASSIFIABLE_ERRORS = (SquashError, WalkError, zipfile.BadZipFile, zipfile.LargeZipFile, OSError)


def describe(err: BaseException) -> str:
    """Human readable text for an exception, never empty."""
    text = str(err)
    if text:
        return text
    errno = getattr(err, "errno", None)
    if errno:
        return os.strerror(errno)
    return type(err).__name__


def classify_os_error(err: OSError) -> ErrorKind:
    """Filter an OSError into NotFound, PermissionDenied, AlreadyExists or IoError."""
    text = describe(err)
    if isinstance(err, FileNotFoundError):
        kind = NotFound(error_title=text)
    elif isinstance(err, PermissionError):
        kind = PermissionDenied(error_title=text)
    elif isinstance(err, FileExistsError):
        kind = AlreadyExists(error_title=text)
    else:
        kind = IoError(reason=text)

    logger.debug(f"Classified {type(err).__name__} as {type(kind).__name__}")
    return kind


def classify_lz4_error(err: Exception) -> ErrorKind:
    """Classify an error raised while running the LZ4 frame codec."""
    if isinstance(err, OSError):
        return classify_os_error(err)
    logger.debug(f"Classified {type(err).__name__} as Lz4Error")
    return Lz4Error(reason=describe(err))


def classify_zip_error(err: Exception) -> ErrorKind:
    """
    Classify an error raised by the zip archive reader or writer.

    A KeyError means a member lookup failed inside an archive that opened
    fine. It is reported apart from NotFound, which is about paths on disk.
    """
    if isinstance(err, OSError):
        return classify_os_error(err)

    if isinstance(err, _INVALID_ZIP_ERRORS):
        kind = InvalidZipArchive(code=describe(err))
    elif isinstance(err, KeyError):
        kind = Custom(
            reason=FinalMessage.with_title("Unexpected error in zip archive").detail("File not found")
        )
    elif isinstance(err, _UNSUPPORTED_ZIP_ERRORS):
        kind = UnsupportedZipArchive(code=describe(err))
    else:
        raise TypeError(f"Not a zip archive error: {type(err).__name__}")

    logger.debug(f"Classified {type(err).__name__} as {type(kind).__name__}")
    return kind


def classify_walk_error(err: WalkError) -> ErrorKind:
    logger.debug("Classified WalkError as WalkdirError")
    return WalkdirError(reason=describe(err))


def classify(err: BaseException) -> ErrorKind:
    """
    Classify any supported failure.

    Raises:
        TypeError: If err does not come from a classified failure domain
    """
    if isinstance(err, SquashError):
        return err.kind
    if isinstance(err, WalkError):
        return classify_walk_error(err)
    if isinstance(err, (zipfile.BadZipFile, zipfile.LargeZipFile)):
        return classify_zip_error(err)
    if isinstance(err, OSError):
        return classify_os_error(err)
    raise TypeError(f"Cannot classify {type(err).__name__}: {err}")


@contextmanager
def os_errors():
    """Re-raise OSError as SquashError."""
    try:
        yield
    except OSError as e:
        raise SquashError(classify_os_error(e)) from e


@contextmanager
def lz4_errors():
    """Re-raise failures from lz4.frame (and its file I/O) as SquashError."""
    try:
        yield
    except SquashError:
        raise
    except (OSError, RuntimeError, EOFError) as e:
        raise SquashError(classify_lz4_error(e)) from e


@contextmanager
def zip_errors():
    """Re-raise failures from zipfile (and its file I/O) as SquashError."""
    try:
        yield
    except SquashError:
        raise
    except (OSError, KeyError, *_INVALID_ZIP_ERRORS, *_UNSUPPORTED_ZIP_ERRORS) as e:
        raise SquashError(classify_zip_error(e)) from e


@contextmanager
def walk_errors():
    """Re-raise WalkError as SquashError."""
    try:
        yield
    except WalkError as e:
        raise SquashError(classify_walk_error(e)) from e
