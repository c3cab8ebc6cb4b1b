"""Tests for version module."""

import struct
import pytest

from bininfo import version
from bininfo.version import get_file_version
from bininfo.exceptions import (
    BinaryNotFoundError,
    VersionInfoUnavailableError,
)


class FakeStringTable:
    def __init__(self, entries):
        self.entries = entries


class FakeBlock:
    def __init__(self, key, tables=()):
        self.Key = key
        self.StringTable = list(tables)


class FakeFixedFileInfo:
    def __init__(self, ms, ls):
        self.FileVersionMS = ms
        self.FileVersionLS = ls


class FakePE:
    """Stand-in for pefile.PE carrying prepared version resources."""

    def __init__(self, file_info=None, fixed=None):
        self.FileInfo = file_info
        self.VS_FIXEDFILEINFO = fixed
        self.parsed_directories = None
        self.closed = False

    def parse_data_directories(self, directories=None):
        self.parsed_directories = directories

    def close(self):
        self.closed = True


@pytest.fixture
def fake_pe(monkeypatch):
    """Patch pefile.PE to return a FakePE built from keyword arguments."""
    def _install(**kwargs):
        pe = FakePE(**kwargs)

        def factory(path, fast_load=False):
            assert fast_load
            return pe

        monkeypatch.setattr(version.pefile, "PE", factory)
        return pe
    return _install


class TestGetFileVersion:
    """Tests for get_file_version function."""

    def test_string_file_version(self, fake_pe):
        """Test FileVersion string is preferred."""
        pe = fake_pe(
            file_info=[[
                FakeBlock(b"StringFileInfo", [
                    FakeStringTable({
                        b"CompanyName": b"Example",
                        b"FileVersion": b"10.0.19041.1 (WinBuild.160101.0800)",
                    }),
                ]),
                FakeBlock(b"VarFileInfo"),
            ]],
            fixed=[FakeFixedFileInfo(0x000A0000, 0x4A610001)],
        )

        assert get_file_version("app.exe") == "10.0.19041.1 (WinBuild.160101.0800)"
        assert pe.closed

    def test_only_resource_directory_parsed(self, fake_pe):
        """Test the resource directory is the only one parsed."""
        pe = fake_pe(fixed=[FakeFixedFileInfo(0x00010000, 0)])

        get_file_version("app.exe")

        assert pe.parsed_directories == [
            version.pefile.DIRECTORY_ENTRY["IMAGE_DIRECTORY_ENTRY_RESOURCE"]
        ]

    def test_flat_file_info_list(self, fake_pe):
        """Test blocks stored directly in FileInfo."""
        fake_pe(file_info=[
            FakeBlock(b"StringFileInfo", [
                FakeStringTable({b"FileVersion": b"2.3.4.5"}),
            ]),
        ])

        assert get_file_version("lib.dll") == "2.3.4.5"

    def test_fixed_file_info_fallback(self, fake_pe):
        """Test dotted version from VS_FIXEDFILEINFO."""
        fake_pe(
            file_info=[[
                FakeBlock(b"StringFileInfo", [
                    FakeStringTable({b"ProductName": b"Example"}),
                ]),
            ]],
            fixed=[FakeFixedFileInfo(0x00010002, 0x00030004)],
        )

        assert get_file_version("app.exe") == "1.2.3.4"

    def test_no_version_resource(self, fake_pe):
        """Test binary without version resource."""
        pe = fake_pe()

        with pytest.raises(VersionInfoUnavailableError):
            get_file_version("app.exe")
        assert pe.closed

    def test_not_a_pe_file(self, tmp_path):
        """Test pefile rejecting the image."""
        data = bytearray(0x100)
        struct.pack_into("<i", data, 0x3C, 0x80)
        data[0x80:0x86] = b"\x50\x45\x00\x00\x64\x86"
        path = tmp_path / "nomz.exe"
        path.write_bytes(bytes(data))

        with pytest.raises(VersionInfoUnavailableError, match="nomz.exe"):
            get_file_version(str(path))

    def test_nonexistent_file(self, tmp_path):
        """Test missing file error."""
        with pytest.raises(BinaryNotFoundError):
            get_file_version(str(tmp_path / "missing.exe"))

    def test_empty_path(self):
        """Test a path is required."""
        with pytest.raises(ValueError):
            get_file_version("")
