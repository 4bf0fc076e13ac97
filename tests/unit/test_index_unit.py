from sazparser.archive import ArchiveEntry
from sazparser.index import infer_session_range, session_paths


def test_infer_session_range():
    paths = ["raw/001_c.txt", "raw/001_s.txt", "raw/002_c.txt", "raw/002_s.txt"]
    assert infer_session_range(paths) == (2, 3)


def test_infer_from_entries():
    entries = [ArchiveEntry(path=p, size=0, contents="") for p in ("raw/07_c.txt", "raw/07_s.txt")]
    assert infer_session_range(entries) == (7, 2)


def test_no_matching_names():
    assert infer_session_range([]) == (0, 0)
    assert infer_session_range(["[Content_Types].xml", "raw/_index.htm", "raw/notes.txt"]) == (0, 0)


def test_other_names_are_skipped():
    paths = [
        "[Content_Types].xml",
        "raw/_index.htm",
        "raw/1_c.txt",
        "raw/1_m.xml",
        "raw/1_s.txt",
        "raw/2_w.txt",
    ]
    assert infer_session_range(paths) == (2, 1)


def test_width_follows_the_maximum():
    assert infer_session_range(["raw/0009_c.txt", "raw/10_c.txt"]) == (10, 2)
    assert infer_session_range(["raw/10_c.txt", "raw/0009_c.txt"]) == (10, 2)


def test_equal_maximum_keeps_first_width():
    assert infer_session_range(["raw/010_c.txt", "raw/10_s.txt"]) == (10, 3)


def test_order_does_not_matter():
    paths = ["raw/3_c.txt", "raw/1_c.txt", "raw/2_c.txt"]
    assert infer_session_range(paths) == (3, 1)


def test_session_paths():
    assert session_paths(7, 3) == ("raw/007_c.txt", "raw/007_s.txt")
    assert session_paths(12, 1) == ("raw/12_c.txt", "raw/12_s.txt")
    assert session_paths(1, 0) == ("raw/1_c.txt", "raw/1_s.txt")
    assert session_paths(2, 2, folder="sessions/") == ("sessions/02_c.txt", "sessions/02_s.txt")


def test_non_ascii_digits_are_skipped():
    assert infer_session_range(["raw/١_c.txt", "raw/١_s.txt"]) == (0, 0)
    assert infer_session_range(["raw/١_c.txt", "raw/2_c.txt"]) == (2, 1)
