from pathlib import Path

import pytest

from teapacket.assets import asset_path, read_all_bytes_from_asset, read_text_asset


def test_asset_path_joins_root_and_name(tmp_path):
    assert asset_path("shaders/a.vert", tmp_path) == tmp_path / "shaders" / "a.vert"


def test_asset_path_default_root():
    assert asset_path("model.bin") == Path("assets") / "model.bin"


def test_read_all_bytes_round_trip(tmp_path):
    payload = bytes(range(256))
    (tmp_path / "blob.bin").write_bytes(payload)
    assert read_all_bytes_from_asset("blob.bin", tmp_path) == payload


def test_read_all_bytes_keeps_trailing_nul(tmp_path):
    (tmp_path / "blob.bin").write_bytes(b"abc\0")
    assert read_all_bytes_from_asset("blob.bin", tmp_path) == b"abc\0"


def test_read_text_strips_single_trailing_nul(tmp_path):
    (tmp_path / "text.txt").write_bytes(b"hello\0\0")
    assert read_text_asset("text.txt", tmp_path) == "hello\0"


def test_read_text_without_nul(tmp_path):
    (tmp_path / "text.txt").write_bytes(b"void main() {}\n")
    assert read_text_asset("text.txt", tmp_path) == "void main() {}\n"


def test_read_text_empty_file(tmp_path):
    (tmp_path / "empty.txt").write_bytes(b"")
    assert read_text_asset("empty.txt", tmp_path) == ""


def test_missing_asset_raises(tmp_path):
    with pytest.raises(FileNotFoundError, match="missing.bin failed to open"):
        read_all_bytes_from_asset("missing.bin", tmp_path)


def test_missing_text_asset_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_text_asset("missing.txt", tmp_path)