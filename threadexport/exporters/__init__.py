"""CSV and HTML exporters."""

from .csv_export import build_csv, write_csv, collapse_newlines
from .html_export import render_table, render_post_info, build_html_document, write_html

__all__ = [
    "build_csv",
    "write_csv",
    "collapse_newlines",
    "render_table",
    "render_post_info",
    "build_html_document",
    "write_html"
]
