"""
CSV export of the comment table.

Rows are written in the session's current order, so a sorted table exports
sorted.
"""

import csv
import io
import logging
import re
from pathlib import Path
from typing import List

from ..core.dates import format_date
from ..core.session import ExportSession
from ..exceptions import NoDataError


COMPACT_HEADER = ["Number", "Body (Compact)"]
FULL_HEADER = ["Number", "Level", "Body", "Author", "Date(UTC)", "Upvotes", "Downvotes"]

NEWLINES = re.compile(r"\r?\n|\n\r|\r")


def collapse_newlines(text: str) -> str:
    """Replace every line break with a single space."""
    return NEWLINES.sub(' ', text)


def compact_meta(author: str, date_string: str, score: int) -> str:
    return f"(by {author}, {date_string}, ↑↓ {score})"


def compact_body(body: str, author: str, date_string: str, score: int) -> str:
    return f"{body} {compact_meta(author, date_string, score)}"


def build_rows(session: ExportSession) -> List[List[str]]:
    """
    Build header and data rows for the session's layout.

    Raises:
        NoDataError: If no thread has been loaded
    """
    if not session.has_data:
        raise NoDataError("No table data to download. Please export first.")

    prefs = session.preferences
    rows: List[List[str]] = []

    if prefs.compact_mode:
        rows.append(COMPACT_HEADER)
        for record in session.records:
            date_string = format_date(record.timestamp, prefs.date_format)
            body = record.body
            if prefs.remove_newlines:
                body = collapse_newlines(body)
            combined = compact_body(body, record.author, date_string, record.score)
            rows.append([record.numbering, collapse_newlines(combined)])
    else:
        rows.append(FULL_HEADER)
        for record in session.records:
            date_string = collapse_newlines(format_date(record.timestamp, prefs.date_format))
            body = record.body
            if prefs.remove_newlines:
                body = collapse_newlines(body)
            rows.append([
                record.numbering,
                str(record.level),
                body,
                record.author,
                date_string,
                str(record.upvotes),
                str(record.downvotes),
            ])

    return rows


def build_csv(session: ExportSession) -> str:
    """Render the table as CSV text. The header is bare, every data field is quoted."""
    header, *rows = build_rows(session)
    buffer = io.StringIO()
    buffer.write(','.join(header) + '\n')
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator='\n')
    writer.writerows(rows)
    return buffer.getvalue()


def write_csv(session: ExportSession, path: str) -> Path:
    """
    Write the table to a CSV file.

    Args:
        session: Export session with loaded comments
        path: Destination file

    Returns:
        The path written
    """
    content = build_csv(session)
    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    with open(file_path, 'w', encoding='utf-8', newline='') as f:
        f.write(content)
    logging.info(f"Wrote {len(session.records)} comments to {file_path}")
    return file_path
