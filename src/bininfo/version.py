"""File version lookup from the PE version resource."""

import logging
from typing import Optional

import pefile

from .exceptions import (
    BinaryNotFoundError,
    FileOpenError,
    VersionInfoUnavailableError,
)

logger = logging.getLogger(__name__)

FILE_VERSION_KEY = b"FileVersion"


def _decode(value) -> str:
    if isinstance(value, bytes):
        return value.decode("utf-8", "ignore")
    return str(value)


def _string_file_version(pe: pefile.PE) -> Optional[str]:
    """Return FileVersion from the first StringFileInfo table that has one."""
    for file_info in getattr(pe, "FileInfo", None) or []:
        # Older pefile releases store a flat list of blocks
        blocks = file_info if isinstance(file_info, list) else [file_info]
        for block in blocks:
            if getattr(block, "Key", b"") != b"StringFileInfo":
                continue
            for table in getattr(block, "StringTable", []):
                value = table.entries.get(FILE_VERSION_KEY)
                if value:
                    return _decode(value).strip()
    return None


def _fixed_file_version(pe: pefile.PE) -> Optional[str]:
    """Return the dotted version from VS_FIXEDFILEINFO."""
    fixed = getattr(pe, "VS_FIXEDFILEINFO", None)
    if not fixed:
        return None
    entry = fixed[0]
    return (
        f"{entry.FileVersionMS >> 16}.{entry.FileVersionMS & 0xFFFF}"
        f".{entry.FileVersionLS >> 16}.{entry.FileVersionLS & 0xFFFF}"
    )


def get_file_version(path: str) -> str:
    """
    Get the file version string of a PE binary.

    Prefers the FileVersion string of the StringFileInfo block and falls
    back to the numeric version in VS_FIXEDFILEINFO.

    Args:
        path: Path to PE file.

    Returns:
        Version string such as "1.0.0.0".

    Raises:
        ValueError: If path is empty.
        BinaryNotFoundError: If path does not exist.
        FileOpenError: If the file cannot be opened or read.
        VersionInfoUnavailableError: If the binary has no version resource.
    """
    if not path:
        raise ValueError("A binary path is required")

    try:
        pe = pefile.PE(path, fast_load=True)
    except pefile.PEFormatError as e:
        raise VersionInfoUnavailableError(
            f"No version information in {path}: {e}"
        ) from e
    except FileNotFoundError as e:
        raise BinaryNotFoundError(f"Cannot find {path}") from e
    except OSError as e:
        raise FileOpenError(f"Failed to open file: {e}") from e

    try:
        pe.parse_data_directories(
            directories=[
                pefile.DIRECTORY_ENTRY["IMAGE_DIRECTORY_ENTRY_RESOURCE"]
            ]
        )
        version = _string_file_version(pe)
        if version:
            logger.debug("FileVersion string of %s: %s", path, version)
            return version

        version = _fixed_file_version(pe)
        if version:
            logger.debug("Fixed file version of %s: %s", path, version)
            return version
    finally:
        pe.close()

    raise VersionInfoUnavailableError(f"No version information in {path}")
