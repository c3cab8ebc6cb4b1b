"""Core PE header parsing logic."""

import io
import logging
import struct
from typing import BinaryIO, Union

from .constants import (
    PE_SIGNATURE,
    DOS_PE_OFFSET,
    PE_OFFSET_SIZE,
    PE_SIGNATURE_SIZE,
    MACHINE_FIELD_SIZE,
    MachineType,
    X64_MACHINES,
    X86_MACHINES,
)
from .exceptions import (
    BinaryNotFoundError,
    FileOpenError,
    NotAPEImageError,
    TruncatedFileError,
)
from .models import (
    Architecture,
    KnownMachine,
    Machine,
    UnrecognizedMachine,
    machine_from_code,
)

logger = logging.getLogger(__name__)


def _read_exact(stream: BinaryIO, size: int, field: str) -> bytes:
    offset = stream.tell()
    data = stream.read(size)
    if len(data) < size:
        raise TruncatedFileError(
            f"File truncated reading {field} at 0x{offset:x}: "
            f"needed {size} bytes, got {len(data)}"
        )
    return data


def read_word(stream: BinaryIO, field: str = "word") -> int:
    """Read unsigned 16-bit little-endian value."""
    return struct.unpack("<H", _read_exact(stream, MACHINE_FIELD_SIZE, field))[0]


def read_dword(stream: BinaryIO, field: str = "dword") -> int:
    """Read unsigned 32-bit little-endian value."""
    return struct.unpack("<I", _read_exact(stream, PE_SIGNATURE_SIZE, field))[0]


def read_long(stream: BinaryIO, field: str = "long") -> int:
    """Read signed 32-bit little-endian value."""
    return struct.unpack("<i", _read_exact(stream, PE_OFFSET_SIZE, field))[0]


def read_machine_code(stream: BinaryIO) -> int:
    """
    Walk the DOS and COFF headers of an open binary stream.

    Args:
        stream: Seekable binary stream positioned anywhere.

    Returns:
        Raw 16-bit machine type code.

    Raises:
        TruncatedFileError: If a header field runs past end of file.
        NotAPEImageError: If the PE signature is missing or unreachable.
    """
    stream.seek(DOS_PE_OFFSET)
    pe_offset = read_long(stream, "PE header offset")
    logger.debug("PE header offset: 0x%x", pe_offset)

    if pe_offset < 0:
        raise NotAPEImageError(
            f"PE header offset is negative: {pe_offset}, not a PE executable"
        )

    # Seeking past EOF is allowed, the signature read reports truncation
    stream.seek(pe_offset)
    pe_sig = read_dword(stream, "PE signature")
    if pe_sig != PE_SIGNATURE:
        raise NotAPEImageError(
            f"No PE header signature: 0x{pe_sig:x}, not a PE executable"
        )

    machine_code = read_word(stream, "machine type")
    logger.debug("Machine type: 0x%04x", machine_code)
    return machine_code


def read_machine_type(path: str) -> Machine:
    """
    Read the machine type of a PE file.

    Args:
        path: Path to PE file.

    Returns:
        KnownMachine for listed codes, UnrecognizedMachine otherwise.

    Raises:
        ValueError: If path is empty.
        BinaryNotFoundError: If path does not exist.
        FileOpenError: If the file cannot be opened or read.
        TruncatedFileError: If a header field runs past end of file.
        NotAPEImageError: If the PE signature is missing.
    """
    if not path:
        raise ValueError("A binary path is required")

    logger.debug("Reading PE header of %s", path)
    try:
        with open(path, "rb") as f:
            machine_code = read_machine_code(f)
    except FileNotFoundError as e:
        raise BinaryNotFoundError(f"Cannot find {path}") from e
    except OSError as e:
        raise FileOpenError(f"Failed to open file: {e}") from e

    return machine_from_code(machine_code)


def read_machine_type_bytes(data: bytes) -> Machine:
    """
    Read the machine type from raw PE bytes.

    Args:
        data: PE file contents as bytes.

    Returns:
        KnownMachine for listed codes, UnrecognizedMachine otherwise.
    """
    with io.BytesIO(data) as stream:
        return machine_from_code(read_machine_code(stream))


def classify_architecture(
    machine: Union[Machine, MachineType, int],
) -> Architecture:
    """
    Map a machine type to the architecture it reports as.

    AMD64 and IA64 are x64, I386 is x86. Everything else, listed or not,
    is unknown.
    """
    if isinstance(machine, MachineType):
        machine = KnownMachine(machine)
    elif isinstance(machine, int):
        machine = machine_from_code(machine)

    if isinstance(machine, UnrecognizedMachine):
        return Architecture.UNKNOWN
    if machine.machine in X64_MACHINES:
        return Architecture.X64
    if machine.machine in X86_MACHINES:
        return Architecture.X86
    return Architecture.UNKNOWN
