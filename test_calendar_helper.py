from calendar_helper import WEEKDAY_NAMES, jalali_month_matrix, render_month_grid


def test_month_matrix_starts_on_saturday():
    # 1 Farvardin 1403 was a Wednesday
    rows = jalali_month_matrix(1403, 1)
    assert rows[0] == [None, None, None, None, 1, 2, 3]
    assert rows[1][0] == 4
    days = [d for row in rows for d in row if d is not None]
    assert days == list(range(1, 32))
    assert all(len(row) == 7 for row in rows)


def test_month_matrix_esfand_follows_leap_year():
    last = lambda rows: max(d for row in rows for d in row if d is not None)
    assert last(jalali_month_matrix(1403, 12)) == 30
    assert last(jalali_month_matrix(1404, 12)) == 29


def test_render_month_grid():
    lines = render_month_grid(1403, 1)
    assert lines[0] == "فروردین 1403"
    assert lines[1].split() == WEEKDAY_NAMES
    assert lines[2].split() == ["1", "2", "3"]
    assert lines[2].endswith(" 1  2  3")
    assert lines[-1].split()[-1] == "31"
    assert len(lines) == 2 + len(jalali_month_matrix(1403, 1))
