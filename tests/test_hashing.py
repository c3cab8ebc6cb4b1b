"""Tests for hashing module."""

import hashlib
import pytest

from bininfo.hashing import get_content_hash
from bininfo.constants import HASH_CHUNK_SIZE
from bininfo.exceptions import ContentHashError


class TestGetContentHash:
    """Tests for get_content_hash function."""

    def test_md5_known_value(self, tmp_path):
        """Test MD5 of a known input."""
        path = tmp_path / "abc.bin"
        path.write_bytes(b"abc")

        assert get_content_hash(str(path)) == "900150983cd24fb0d6963f7d28e17f72"

    def test_empty_file(self, tmp_path):
        """Test MD5 of an empty file."""
        path = tmp_path / "empty.bin"
        path.write_bytes(b"")

        assert get_content_hash(str(path)) == "d41d8cd98f00b204e9800998ecf8427e"

    def test_multi_chunk_file(self, tmp_path):
        """Test files larger than one chunk hash as a whole."""
        data = bytes(range(256)) * (HASH_CHUNK_SIZE // 128 + 3)
        path = tmp_path / "big.bin"
        path.write_bytes(data)

        digest = get_content_hash(str(path))

        assert digest == hashlib.md5(data).hexdigest()
        assert len(digest) == 32
        assert digest == digest.lower()

    def test_other_algorithm(self, tmp_path):
        """Test selecting another hashlib algorithm."""
        path = tmp_path / "abc.bin"
        path.write_bytes(b"abc")

        assert get_content_hash(str(path), "sha256") == hashlib.sha256(b"abc").hexdigest()

    def test_unsupported_algorithm(self, tmp_path):
        """Test unknown algorithm names are rejected."""
        path = tmp_path / "abc.bin"
        path.write_bytes(b"abc")

        with pytest.raises(ValueError):
            get_content_hash(str(path), "not-a-hash")

    def test_nonexistent_file(self, tmp_path):
        """Test read failures surface as ContentHashError."""
        with pytest.raises(ContentHashError) as excinfo:
            get_content_hash(str(tmp_path / "missing.bin"))

        assert isinstance(excinfo.value, OSError)

    def test_empty_path(self):
        """Test a path is required."""
        with pytest.raises(ValueError):
            get_content_hash("")
