# ABOUTME: Zip and LZ4 compression drivers used by the squash command line
# ABOUTME: Every library call runs inside the matching error classification context
"""Archive operations"""

import io
import logging
import shutil
import zipfile
from dataclasses import dataclass
from pathlib import Path, PurePosixPath

import lz4.frame

from squash.classify import lz4_errors, os_errors, walk_errors, zip_errors
from squash.exceptions import CompressingRootFolder, SquashError
from squash.messages import FinalMessage
from squash.walk import walk_files

logger = logging.getLogger(__name__)

SUPPORTED_FORMATS = (".zip", ".lz4")


@dataclass
class ArchiveEntry:
    """One member of a zip archive"""

    name: str
    size: int
    compressed_size: int
    is_dir: bool = False


def ensure_not_root(path) -> None:
    """
    Refuse to compress a filesystem root.

    Raises:
        SquashError: CompressingRootFolder if path resolves to a root
    """
    resolved = Path(path).resolve()
    if resolved == Path(resolved.anchor):
        raise SquashError(CompressingRootFolder())


def _archive_format(path: Path) -> str:
    suffix = path.suffix.lower()
    if suffix not in SUPPORTED_FORMATS:
        raise SquashError.from_message(
            FinalMessage.with_title(f"Cannot detect the archive format of '{path}'")
            .detail(f"Unknown extension '{suffix}'" if suffix else "File has no extension")
            .hint(f"Supported formats: {', '.join(SUPPORTED_FORMATS)}")
        )
    return suffix


def _write_new_file(output: Path, data: bytes) -> None:
    # Exclusive create: never overwrite an existing file
    with os_errors():
        with open(output, "xb") as f:
            f.write(data)


def _member_path(output_dir: Path, info: zipfile.ZipInfo) -> Path:
    # Same sanitizing as ZipFile.extract: no absolute paths, no "." or ".." parts
    parts = [p for p in PurePosixPath(info.filename).parts if p not in ("/", ".", "..")]
    return output_dir.joinpath(*parts)


def _extract_new(zf: zipfile.ZipFile, info: zipfile.ZipInfo, output_dir: Path) -> Path | None:
    """
    Extract one member without overwriting anything.

    Returns:
        Path of the written file, None for directory entries

    Raises:
        FileExistsError: If the target file already exists
    """
    target = _member_path(output_dir, info)
    if info.is_dir() or target == output_dir:
        target.mkdir(parents=True, exist_ok=True)
        return None

    target.parent.mkdir(parents=True, exist_ok=True)
    with zf.open(info) as src, open(target, "xb") as dst:
        shutil.copyfileobj(src, dst)
    return target


def _arcname(base: Path, file: Path) -> str:
    if file == base:
        return file.name
    return (Path(base.name) / file.relative_to(base)).as_posix()


def _compress_zip(inputs: list[Path], output: Path) -> None:
    buffer = io.BytesIO()

    with walk_errors(), zip_errors():
        # Files older than 1980 get the earliest zip timestamp instead of failing
        with zipfile.ZipFile(
            buffer, "w", compression=zipfile.ZIP_DEFLATED, strict_timestamps=False
        ) as zf:
            for base in inputs:
                for file in walk_files(base):
                    arcname = _arcname(base, file)
                    logger.debug(f"Adding {file} as {arcname}")
                    zf.write(file, arcname)

    _write_new_file(output, buffer.getvalue())


def _compress_lz4(inputs: list[Path], output: Path) -> None:
    if len(inputs) != 1 or inputs[0].is_dir():
        raise SquashError.from_message(
            FinalMessage.with_title("Cannot compress to lz4")
            .detail("lz4 compresses exactly one file")
            .hint("Use a .zip output to compress several files or a directory")
        )

    with lz4_errors():
        data = lz4.frame.compress(inputs[0].read_bytes())

    _write_new_file(output, data)


def compress(inputs, output) -> Path:
    """
    Compress files or directories into output, choosing the format by extension.

    Args:
        inputs: Paths to compress
        output: Archive to create; must not exist yet

    Returns:
        Path of the created archive

    Raises:
        SquashError: On any failure
    """
    inputs = [Path(p) for p in inputs]
    output = Path(output)

    for path in inputs:
        ensure_not_root(path)

    fmt = _archive_format(output)
    logger.info(f"Compressing {len(inputs)} input(s) into {output}")

    if fmt == ".zip":
        _compress_zip(inputs, output)
    else:
        _compress_lz4(inputs, output)

    return output


def decompress(archive, output_dir=".") -> list[Path]:
    """
    Decompress an archive into output_dir.

    Returns:
        Paths of the files written

    Raises:
        SquashError: On any failure
    """
    archive = Path(archive)
    output_dir = Path(output_dir)
    fmt = _archive_format(archive)

    with os_errors():
        output_dir.mkdir(parents=True, exist_ok=True)

    if fmt == ".zip":
        with zip_errors():
            with zipfile.ZipFile(archive) as zf:
                written = [
                    path
                    for path in (_extract_new(zf, info, output_dir) for info in zf.infolist())
                    if path is not None
                ]
    else:
        with lz4_errors():
            data = lz4.frame.decompress(archive.read_bytes())
        target = output_dir / archive.stem
        _write_new_file(target, data)
        written = [target]

    logger.info(f"Decompressed {archive} into {output_dir} ({len(written)} file(s))")
    return written


def list_archive(archive) -> list[ArchiveEntry]:
    """
    List the members of a zip archive.

    Raises:
        SquashError: On any failure
    """
    archive = Path(archive)
    if _archive_format(archive) != ".zip":
        raise SquashError.from_message(
            FinalMessage.with_title(f"Cannot list '{archive}'")
            .detail("Only zip archives have a table of contents")
        )

    with zip_errors():
        with zipfile.ZipFile(archive) as zf:
            return [
                ArchiveEntry(
                    name=info.filename,
                    size=info.file_size,
                    compressed_size=info.compress_size,
                    is_dir=info.is_dir(),
                )
                for info in zf.infolist()
            ]


def extract_member(archive, name: str, output_dir=".") -> Path:
    """
    Extract a single member of a zip archive. Existing files are not overwritten.

    Raises:
        SquashError: On any failure, including a member missing from the archive
    """
    archive = Path(archive)
    output_dir = Path(output_dir)

    with zip_errors():
        with zipfile.ZipFile(archive) as zf:
            info = zf.getinfo(name)
            written = _extract_new(zf, info, output_dir)
    return written if written is not None else _member_path(output_dir, info)
