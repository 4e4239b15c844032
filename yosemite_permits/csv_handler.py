import csv

FIELDNAMES = ['date', 'trailhead_name', 'availability']


def write_availability_csv(report_rows, stream):
    """
    Write assembled availability rows to an open text stream.

    Output format:
    date,trailhead_name,availability
    2020-10-02,Alder Creek,30
    """
    writer = csv.writer(stream, lineterminator='\n')
    writer.writerow(FIELDNAMES)

    for day, trailhead_name, availability in report_rows:
        writer.writerow([day.strftime('%Y-%m-%d'), trailhead_name, availability])


def save_availability_to_csv(report_rows, filename):
    """Save assembled availability rows to a CSV file."""
    with open(filename, 'w', newline='') as f:
        write_availability_csv(report_rows, f)
