"""
Test CLI inspect and version commands
"""
import json
import struct

import msgpack
import pytest
from typer.testing import CliRunner

import extpack
from extpack.cli.main import app
from extpack.core.codec.packer import Packer

runner = CliRunner()


class Vector:
    def __init__(self, x, y):
        self.x = x
        self.y = y

    def __repr__(self):
        return f"Vector({self.x}, {self.y})"

    def to_msgpack_ext(self):
        return struct.pack(">ff", self.x, self.y)

    @classmethod
    def from_msgpack_ext(cls, data):
        return cls(*struct.unpack(">ff", data))


@pytest.fixture
def sample_file(tmp_path):
    """File with a map, a string and two ext frames (one unregistered)"""
    path = tmp_path / "sample.msgpack"
    packer = Packer()
    packer.register_type(5, Vector, "to_msgpack_ext")
    packer.write({"name": "origin"})
    packer.write(Vector(1.0, 2.0))
    packer.write_ext(9, b"raw")
    path.write_bytes(packer.to_bytes())
    return path


class TestInspectCommand:
    def test_json_output(self, sample_file):
        extpack.register_type(5, Vector)

        result = runner.invoke(app, ["inspect", str(sample_file), "--json"])

        assert result.exit_code == 0
        rows = json.loads(result.stdout)
        assert [row["type"] for row in rows] == ["dict", "Vector", "ExtType"]
        assert [row["ext_code"] for row in rows] == [None, 5, 9]
        assert rows[1]["preview"] == "Vector(1.0, 2.0)"

    def test_unregistered_types_are_shown(self, sample_file):
        result = runner.invoke(app, ["inspect", str(sample_file), "--json"])

        assert result.exit_code == 0
        rows = json.loads(result.stdout)
        assert [row["ext_code"] for row in rows] == [None, 5, 9]
        assert rows[1]["type"] == "ExtType"

    def test_strict_mode_fails_on_unknown_ext(self, sample_file):
        result = runner.invoke(app, ["inspect", str(sample_file), "--strict"])

        assert result.exit_code == 1
        assert "unexpected extension type" in result.stdout

    def test_table_output(self, sample_file):
        result = runner.invoke(app, ["inspect", str(sample_file)])

        assert result.exit_code == 0
        assert "sample.msgpack" in result.stdout
        assert "ExtType" in result.stdout

    def test_module_import_failure(self, sample_file):
        result = runner.invoke(app, ["inspect", str(sample_file), "-m", "no_such_module_xyz"])

        assert result.exit_code == 1
        assert "no_such_module_xyz" in result.stdout

    def test_malformed_file(self, tmp_path):
        path = tmp_path / "broken.msgpack"
        path.write_bytes(b"\xc1")

        result = runner.invoke(app, ["inspect", str(path)])

        assert result.exit_code == 1

    def test_truncated_file(self, tmp_path):
        path = tmp_path / "truncated.msgpack"
        path.write_bytes(msgpack.packb(1) + msgpack.packb("hello world")[:-3])

        result = runner.invoke(app, ["inspect", str(path), "--json"])

        assert result.exit_code == 1
        assert "truncated object at byte 1" in result.stdout

    def test_timestamp_code_is_listed_as_ext(self, tmp_path):
        path = tmp_path / "stamp.msgpack"
        path.write_bytes(Packer().write_ext(-1, b"\x00\x00\x00\x2a").to_bytes())

        result = runner.invoke(app, ["inspect", str(path), "--json"])

        assert result.exit_code == 0
        rows = json.loads(result.stdout)
        assert [(row["type"], row["ext_code"]) for row in rows] == [("ExtType", -1)]

    def test_missing_file(self, tmp_path):
        result = runner.invoke(app, ["inspect", str(tmp_path / "missing.msgpack")])
        assert result.exit_code != 0

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.msgpack"
        path.write_bytes(b"")

        result = runner.invoke(app, ["inspect", str(path), "--json"])

        assert result.exit_code == 0
        assert json.loads(result.stdout) == []


class TestVersionCommand:
    def test_version(self):
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert extpack.__version__ in result.stdout
