import os

import pytest

from quicksaver.core.saves.scanner import list_files


def test_lists_files_with_mtimes(tmp_path):
    (tmp_path / "Quicksave0_a.sfs").write_bytes(b"a")
    (tmp_path / "Save1_a.sfs").write_bytes(b"b")
    (tmp_path / "subdir").mkdir()
    os.utime(tmp_path / "Quicksave0_a.sfs", (1000.0, 1000.0))

    files = {os.path.basename(f.path): f for f in list_files(str(tmp_path))}

    assert set(files) == {"Quicksave0_a.sfs", "Save1_a.sfs"}
    assert files["Quicksave0_a.sfs"].last_modified == 1000.0
    assert files["Save1_a.sfs"].path == str(tmp_path / "Save1_a.sfs")


def test_missing_directory_raises(tmp_path):
    with pytest.raises(OSError):
        list_files(str(tmp_path / "nope"))
