"""Magic numbers and constants for PE header inspection."""

from enum import IntEnum

# Signature magic values
PE_SIGNATURE = 0x00004550  # "PE\0\0" (little-endian)

# DOS header offsets
DOS_PE_OFFSET = 0x3C  # File address of COFF header (e_lfanew)

# Field sizes in bytes
PE_OFFSET_SIZE = 4
PE_SIGNATURE_SIZE = 4
MACHINE_FIELD_SIZE = 2


class MachineType(IntEnum):
    """IMAGE_FILE_MACHINE_* codes from the PE/COFF specification."""
    UNKNOWN = 0x0
    AM33 = 0x1D3
    AMD64 = 0x8664
    ARM = 0x1C0
    EBC = 0xEBC
    I386 = 0x14C
    IA64 = 0x200
    M32R = 0x9041
    MIPS16 = 0x266
    MIPSFPU = 0x366
    MIPSFPU16 = 0x466
    POWERPC = 0x1F0
    POWERPCFP = 0x1F1
    R4000 = 0x166
    SH3 = 0x1A2
    SH3DSP = 0x1A3
    SH4 = 0x1A6
    SH5 = 0x1A8
    THUMB = 0x1C2
    WCEMIPSV2 = 0x169


# Machine type names
# From https://learn.microsoft.com/en-us/windows/win32/debug/pe-format
MACHINE_NAMES = {
    MachineType.UNKNOWN: "Unknown",
    MachineType.AM33: "Matsushita AM33",
    MachineType.AMD64: "x64",
    MachineType.ARM: "ARM LE",
    MachineType.EBC: "EFI bytecode",
    MachineType.I386: "Intel 386",
    MachineType.IA64: "Intel Itanium",
    MachineType.M32R: "Mitsubishi M32R LE",
    MachineType.MIPS16: "MIPS16",
    MachineType.MIPSFPU: "MIPS w/FPU",
    MachineType.MIPSFPU16: "MIPS16 w/FPU",
    MachineType.POWERPC: "PowerPC LE",
    MachineType.POWERPCFP: "PowerPC w/FPU",
    MachineType.R4000: "MIPS LE",
    MachineType.SH3: "Hitachi SH3",
    MachineType.SH3DSP: "Hitachi SH3 DSP",
    MachineType.SH4: "Hitachi SH4",
    MachineType.SH5: "Hitachi SH5",
    MachineType.THUMB: "ARM or Thumb",
    MachineType.WCEMIPSV2: "MIPS LE WCE v2",
}

# Machine types grouped by the architecture they report as
X64_MACHINES = frozenset({MachineType.AMD64, MachineType.IA64})
X86_MACHINES = frozenset({MachineType.I386})

# Content hashing
HASH_CHUNK_SIZE = 64 * 1024
DEFAULT_HASH_ALGORITHM = "md5"


def get_machine_name(machine_id: int) -> str:
    """Get human-readable machine type name."""
    try:
        return MACHINE_NAMES[MachineType(machine_id)]
    except ValueError:
        return f"Unrecognized (0x{machine_id:04x})"
