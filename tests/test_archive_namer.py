import os

from quicksaver.core.saves.archive_namer import highest_save_number, next_archive_name, next_archive_path


def test_next_number_follows_highest_existing():
    names = ["Save1_a.sfs", "Save3_b.sfs", "Quicksave0_x.sfs"]

    assert next_archive_name("Quicksave0_x.sfs", names) == "Save4_x.sfs"


def test_first_archive_is_save1():
    names = ["Quicksave0_2024.sfs", "Autosave0_2024.sfs"]

    assert next_archive_name("Quicksave0_2024.sfs", names) == "Save1_2024.sfs"


def test_non_matching_names_are_ignored():
    names = ["Save7.sfs", "Save8_a.dat", "SaveX_a.sfs", "save9_a.sfs"]

    assert highest_save_number(names) == 0


def test_numbers_compare_numerically():
    assert highest_save_number(["Save9_a.sfs", "Save10_b.sfs", "Save002_c.sfs"]) == 10


def test_remainder_of_name_is_preserved():
    name = "Quicksave0_0CA3C2D1_Player_Quicksave0_NewAtlantis_000123_20240101.sfs"

    # Only the first occurrence is replaced
    assert next_archive_name(name, ["Save41_z.sfs"]) == (
        "Save42_0CA3C2D1_Player_Quicksave0_NewAtlantis_000123_20240101.sfs"
    )


def test_archive_path_stays_in_quicksave_directory():
    path = os.path.join("saves", "Quicksave0_x.sfs")

    assert next_archive_path(path, ["Save2_q.sfs"]) == os.path.join("saves", "Save3_x.sfs")
