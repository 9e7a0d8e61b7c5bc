from faculty.data import build_records
from faculty.profile import degree_history, find_record, profile_links


def test_find_record_by_slug(config):
    records = build_records([["Name"], ["Ann Lee"], ["Bo Chen"]], config)
    assert find_record(records, "bo-chen").name == "Bo Chen"


def test_find_record_missing_returns_none(config):
    records = build_records([["Name"], ["Ann Lee"]], config)
    assert find_record(records, "nobody") is None
    assert find_record(records, "") is None
    assert find_record(records, None) is None


def test_find_record_last_duplicate_slug_wins(config):
    records = build_records([["Name", "Position"], ["Ann Lee", "Lecturer"], ["Ann  Lee", "Professor"]], config)
    assert find_record(records, "ann-lee").position == "Professor"


def test_profile_links_are_normalized_and_skip_empty(config):
    rows = [["Name", "Google Scholar", "LinkedIn"], ["Ann", "scholar.google.com/ann", ""]]
    record = build_records(rows, config)[0]
    assert profile_links(record) == [("Google Scholar", "https://scholar.google.com/ann")]


def test_degree_history_only_filled_degrees(config):
    rows = [
        ["Name", "BSc", "BSc School", "MSc", "MSc School", "PhD", "PhD School"],
        ["Ann", "2001", "Univ A", "", "Univ B", "2008", "Univ C"],
    ]
    record = build_records(rows, config)[0]
    assert degree_history(record) == [
        ("BSc", "Univ A, BSc (2001)"),
        ("PhD", "Univ C, PhD (2008)"),
    ]
