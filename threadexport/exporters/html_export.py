"""
HTML export of the comment table and the post summary.

The table markup is meant to be pasted into word processors, so it is a
plain ``<table>`` without scripts or styles beyond two class names.
"""

import logging
from pathlib import Path
from typing import List

from ..core.dates import format_date
from ..core.session import ExportSession
from ..exceptions import NoDataError
from ..models import PostRecord
from .csv_export import NEWLINES, compact_meta


TABLE_OPEN = '<table id="output-table" class="table table-hover">'


def escape_html(value) -> str:
    if not isinstance(value, str):
        return ''
    return (
        value.replace('&', '&amp;')
        .replace('<', '&lt;')
        .replace('>', '&gt;')
        .replace('"', '&quot;')
    )


def format_body_for_html(body: str, remove_newlines: bool) -> str:
    """Escape a body, turning line breaks into spaces or ``<br>`` tags."""
    if remove_newlines:
        return escape_html(NEWLINES.sub(' ', body))
    return '<br>'.join(escape_html(part) for part in NEWLINES.split(body))


def render_table(session: ExportSession) -> str:
    """
    Render the comment table in the session's current order.

    Raises:
        NoDataError: If no thread has been loaded
    """
    if not session.populated:
        raise NoDataError("No table to copy. Please export first.")

    prefs = session.preferences
    lines: List[str] = [TABLE_OPEN, '  <thead>', '    <tr>']

    if prefs.compact_mode:
        headers = ["Number", "Body (Compact)"]
    else:
        headers = ["Number", "Level", "Body", "Author", "Date (UTC)", "Upvotes", "Downvotes"]
    lines.extend(f'      <th>{header}</th>' for header in headers)
    lines.extend(['    </tr>', '  </thead>', '  <tbody>'])

    for record in session.records:
        date_string = format_date(record.timestamp, prefs.date_format)
        body_html = format_body_for_html(record.body, prefs.remove_newlines)
        if prefs.compact_mode:
            meta = compact_meta(record.author, date_string, record.score)
            cells = [escape_html(record.numbering), f"{body_html} {escape_html(meta)}"]
        else:
            cells = [
                escape_html(record.numbering),
                str(record.level),
                body_html,
                escape_html(record.author),
                escape_html(date_string),
                str(record.upvotes),
                str(record.downvotes),
            ]
        lines.append('    <tr>')
        lines.extend(f'      <td>{cell}</td>' for cell in cells)
        lines.append('    </tr>')

    lines.extend(['  </tbody>', '</table>'])
    return '\n'.join(lines)


def render_post_info(post: PostRecord, date_format: str = "iso8601") -> str:
    """Render the post summary block."""
    parts = [
        f'<p><strong>Title:</strong> {escape_html(post.title)}</p>',
        f'<p><strong>Author:</strong> {escape_html(post.author)}</p>',
        f'<p><strong>Date (UTC):</strong> {escape_html(format_date(post.timestamp, date_format))}</p>',
        f'<p><strong>Upvotes:</strong> {post.upvotes}</p>',
        f'<p><strong>Downvotes:</strong> {post.downvotes}</p>',
        f'<p><strong>Score:</strong> {post.score}</p>',
        '<p><strong>Permalink:</strong> '
        f'<a href="{escape_html(post.url)}" target="_blank">View Post</a></p>',
    ]
    if post.selftext:
        parts.append('<p><strong>Self Text:</strong></p>')
        parts.append(f'<pre>{escape_html(post.selftext)}</pre>')
    return '\n'.join(parts)


def build_html_document(session: ExportSession) -> str:
    """Post summary followed by the table, as one HTML document."""
    table = render_table(session)
    post_html = render_post_info(session.post, session.preferences.date_format) if session.post else ''
    title = escape_html(session.post.title) if session.post else 'Reddit comments'
    return (
        '<!DOCTYPE html>\n<html>\n<head>\n<meta charset="utf-8">\n'
        f'<title>{title}</title>\n</head>\n<body>\n'
        f'<div id="post-info">\n{post_html}\n</div>\n{table}\n</body>\n</html>\n'
    )


def write_html(session: ExportSession, path: str) -> Path:
    """Write the post summary and table to an HTML file."""
    content = build_html_document(session)
    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    with open(file_path, 'w', encoding='utf-8') as f:
        f.write(content)
    logging.info(f"Wrote HTML table to {file_path}")
    return file_path
