"""Data models for bininfo."""

from dataclasses import dataclass
from enum import Enum
from typing import Union

from .constants import MachineType, get_machine_name


class Architecture(str, Enum):
    """Architecture reported for a binary."""
    X64 = "x64"
    X86 = "x86"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class KnownMachine:
    """Machine field holding a listed IMAGE_FILE_MACHINE_* code."""
    machine: MachineType

    @property
    def code(self) -> int:
        return int(self.machine)

    @property
    def name(self) -> str:
        return get_machine_name(self.machine)


@dataclass(frozen=True)
class UnrecognizedMachine:
    """Machine field holding a code with no MachineType entry."""
    code: int

    @property
    def name(self) -> str:
        return get_machine_name(self.code)


Machine = Union[KnownMachine, UnrecognizedMachine]


def machine_from_code(code: int) -> Machine:
    """Wrap a raw 16-bit machine code in the matching variant."""
    try:
        return KnownMachine(MachineType(code))
    except ValueError:
        return UnrecognizedMachine(code)


@dataclass
class BinaryReport:
    """Combined inspection result for one binary."""
    filename: str
    machine: Machine
    architecture: Architecture
    version: str
    md5: str = ""  # Empty unless a digest was requested

    def to_line(self) -> str:
        """Render the single-line report."""
        return f"{self.architecture.value}, {self.version}, {self.md5}"

    def to_dict(self) -> dict:
        """Convert report to dictionary for JSON serialization."""
        return {
            "filename": self.filename,
            "machine_type": f"0x{self.machine.code:04x}",
            "machine_name": self.machine.name,
            "recognized": isinstance(self.machine, KnownMachine),
            "architecture": self.architecture.value,
            "version": self.version,
            "md5": self.md5,
        }
