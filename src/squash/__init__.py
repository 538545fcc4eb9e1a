# ABOUTME: Package initialization for the squash archiving tool
# ABOUTME: Defines version, public error API, and package-level logging setup
"""squash - Zip and LZ4 archiving with friendly error reports"""

__version__ = "0.1.0"

import logging

from squash.exceptions import (
    AlreadyExists,
    CompressingRootFolder,
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
    render,
    to_final_message,
)
from squash.messages import FinalMessage, render_message

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Errors
    "SquashError",
    "ErrorKind",
    "IoError",
    "Lz4Error",
    "WalkdirError",
    "NotFound",
    "AlreadyExists",
    "PermissionDenied",
    "InvalidZipArchive",
    "UnsupportedZipArchive",
    "CompressingRootFolder",
    "Custom",
    "to_final_message",
    # Messages
    "FinalMessage",
    "render",
    "render_message",
    "__version__",
]
