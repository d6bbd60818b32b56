# calendar_helper.py
# Jalali month grid for date pickers and the printed report
from jalali import JalaliDate, jalali_to_gregorian, month_length

WEEKDAY_NAMES = ["ش", "ی", "د", "س", "چ", "پ", "ج"]  # Sat..Fri short


def jalali_month_matrix(year, month):
    # returns list of lists of day numbers for week rows (starting Saturday)
    first = jalali_to_gregorian(year, month, 1)
    # date.weekday(): Monday=0 .. Sunday=6; shift so that Saturday=0
    offset = (first.weekday() + 2) % 7
    days = month_length(year, month)

    rows = []
    week = [None] * 7
    i = offset
    for day in range(1, days + 1):
        week[i] = day
        i += 1
        if i == 7:
            rows.append(week)
            week = [None] * 7
            i = 0
    if any(x is not None for x in week):
        rows.append(week)
    return rows


def render_month_grid(year, month):
    """Text lines: month label, weekday header, one line per week."""
    lines = [JalaliDate(year, month, 1).month_label]
    lines.append(" ".join(f"{name:>2}" for name in WEEKDAY_NAMES))
    for week in jalali_month_matrix(year, month):
        lines.append(" ".join("  " if d is None else f"{d:>2}" for d in week))
    return lines
