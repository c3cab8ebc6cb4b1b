"""Combined binary inspection."""

import logging
import os

from .exceptions import BinaryNotFoundError
from .hashing import get_content_hash
from .models import BinaryReport
from .parser import classify_architecture, read_machine_type
from .version import get_file_version

logger = logging.getLogger(__name__)


def inspect_file(path: str, with_md5: bool = False) -> BinaryReport:
    """
    Inspect a PE binary and build its report.

    Each step opens the file on its own. The first failure aborts the
    whole report.

    Args:
        path: Path to PE file.
        with_md5: Also compute the MD5 digest of the file.

    Returns:
        BinaryReport with architecture, version and optional digest.

    Raises:
        BinaryNotFoundError: If path is not an existing file.
        BinInfoError: Any failure of the header, version or hash step.
    """
    if not path:
        raise ValueError("A binary path is required")
    if not os.path.isfile(path):
        raise BinaryNotFoundError(f"Cannot find {path}")

    machine = read_machine_type(path)
    architecture = classify_architecture(machine)
    logger.debug(
        "%s: machine %s (0x%04x), architecture %s",
        path, machine.name, machine.code, architecture.value,
    )

    version = get_file_version(path)
    md5 = get_content_hash(path) if with_md5 else ""

    return BinaryReport(
        filename=path,
        machine=machine,
        architecture=architecture,
        version=version,
        md5=md5,
    )
