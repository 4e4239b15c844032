def assemble(rows, open_only=False):
    """
    Order availability rows for output.

    Rows are sorted by date, then trailhead name (case-sensitive), and
    projected to (date, trailhead_name, availability) tuples. With
    open_only, trailheads with no permits left are dropped.
    """
    ordered = sorted(rows, key=lambda r: (r.date, r.trailhead_name))
    return [row.as_tuple() for row in ordered if not open_only or row.availability > 0]


def get_summary(report_rows):
    """Short human readable summary of an assembled report."""
    if not report_rows:
        return "No availability rows"

    dates = sorted(set(day for day, _, _ in report_rows))
    open_rows = [row for row in report_rows if row[2] > 0]
    trailheads = set(name for _, name, _ in report_rows)

    summary = f"{len(trailheads)} trailheads, {dates[0].strftime('%Y-%m-%d')} to {dates[-1].strftime('%Y-%m-%d')}: "
    summary += f"{len(open_rows)}/{len(report_rows)} trailhead-days open, "
    summary += f"{sum(row[2] for row in report_rows)} permits available"
    return summary
