"""
bininfo - Report architecture, file version and MD5 of Windows PE binaries.

The architecture is read from the machine type field of the COFF header,
located through the e_lfanew offset at 0x3C of the DOS header.
"""

from .parser import (
    read_machine_type,
    read_machine_type_bytes,
    classify_architecture,
)
from .version import get_file_version
from .hashing import get_content_hash
from .report import inspect_file
from .models import (
    Architecture,
    KnownMachine,
    UnrecognizedMachine,
    Machine,
    BinaryReport,
    machine_from_code,
)
from .constants import (
    PE_SIGNATURE,
    DOS_PE_OFFSET,
    MachineType,
    MACHINE_NAMES,
    get_machine_name,
)
from .exceptions import (
    BinInfoError,
    BinaryNotFoundError,
    FileOpenError,
    TruncatedFileError,
    NotAPEImageError,
    VersionInfoUnavailableError,
    ContentHashError,
)

__version__ = "1.0.0"

__all__ = [
    # Main API
    "read_machine_type",
    "read_machine_type_bytes",
    "classify_architecture",
    "get_file_version",
    "get_content_hash",
    "inspect_file",
    # Models
    "Architecture",
    "KnownMachine",
    "UnrecognizedMachine",
    "Machine",
    "BinaryReport",
    "machine_from_code",
    # Constants
    "PE_SIGNATURE",
    "DOS_PE_OFFSET",
    "MachineType",
    "MACHINE_NAMES",
    "get_machine_name",
    # Exceptions
    "BinInfoError",
    "BinaryNotFoundError",
    "FileOpenError",
    "TruncatedFileError",
    "NotAPEImageError",
    "VersionInfoUnavailableError",
    "ContentHashError",
    # Version
    "__version__",
]
