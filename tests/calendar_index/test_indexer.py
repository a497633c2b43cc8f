from factories import hourly, piece
from picker_log.calendar.indexer import DayMark, entries_for_day, group_by_date, mark_selection


def test_group_by_date_newest_first():
    records = [piece("1", "2025-10-03"), piece("2", "2025-10-05"), hourly("3", "2025-10-03")]

    groups = group_by_date(records)

    assert list(groups) == ["2025-10-05", "2025-10-03"]
    assert [r.id for r in groups["2025-10-03"]] == ["1", "3"]
    assert entries_for_day(groups, "2025-10-03") == [records[0], records[2]]
    assert entries_for_day(groups, "2025-01-01") == []


def test_selection_keeps_entries_marker():
    groups = group_by_date([piece("1", "2025-10-03"), piece("2", "2025-10-05")])

    marks = mark_selection(groups, "2025-10-03")

    assert marks["2025-10-03"] == DayMark(has_entries=True, is_selected=True)
    assert marks["2025-10-05"] == DayMark(has_entries=True, is_selected=False)


def test_selection_on_empty_day():
    marks = mark_selection(group_by_date([piece("1", "2025-10-03")]), "2025-10-10")

    assert marks["2025-10-10"] == DayMark(has_entries=False, is_selected=True)
    assert marks["2025-10-03"].has_entries


def test_no_selection():
    marks = mark_selection(group_by_date([piece("1", "2025-10-03")]), None)

    assert marks == {"2025-10-03": DayMark(has_entries=True)}


def test_mark_selection_leaves_groups_untouched():
    groups = group_by_date([piece("1", "2025-10-03")])

    mark_selection(groups, "2025-10-03")

    assert list(groups) == ["2025-10-03"]
    assert [r.id for r in groups["2025-10-03"]] == ["1"]
