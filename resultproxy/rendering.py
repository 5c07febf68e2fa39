"""
HTML rendering of subject results.

The portal's subjects-list endpoint returns a JSON array of rows. The array
is validated into SubjectResultRow models before any markup is produced; a
payload of any other shape (the portal answers with an error object for
unknown roll numbers) raises RenderError instead of producing broken HTML.
"""

from __future__ import annotations

import html
from typing import Any

from pydantic import TypeAdapter, ValidationError

from .errors import RenderError
from .models import CellValue, SubjectResultRow

_ROWS_ADAPTER = TypeAdapter(list[SubjectResultRow])

TABLE_HEADERS = ("S.No", "Subject Code", "Subject Name", "Type", "Credits", "Final Grade")

PAGE_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
    <title>Student Results</title>
    <style>
        body {{
            font-family: Arial, sans-serif;
            background-color: #f2f2f2;
            margin: 0;
            padding: 0;
        }}
        .container {{
            max-width: 800px;
            margin: 20px auto;
            padding: 20px;
            background-color: #fff;
            border-radius: 8px;
            box-shadow: 0 0 10px rgba(0, 0, 0, 0.1);
        }}
        table {{
            width: 100%;
            border-collapse: collapse;
        }}
        th, td {{
            padding: 12px 15px;
            text-align: left;
            border-bottom: 1px solid #ddd;
        }}
        th {{
            background-color: #4CAF50;
            color: white;
            text-transform: uppercase;
        }}
        tr:nth-child(even) {{
            background-color: #f2f2f2;
        }}
        tr:hover {{
            background-color: #ddd;
        }}
    </style>
</head>
<body>
    <div class="container">
        <table>
            <tr>{header}</tr>
{rows}
        </table>
    </div>
</body>
</html>
"""


def parse_subject_rows(payload: Any) -> list[SubjectResultRow]:
    """Validate a subjects-list payload into rows.

    Raises:
        RenderError: If the payload is not a list of objects.
    """
    if not isinstance(payload, list):
        if isinstance(payload, dict) and "error" in payload:
            raise RenderError(f"Cannot render results table: upstream returned an error: {payload['error']}")
        raise RenderError(f"Cannot render results table: expected a list of rows, got {type(payload).__name__}")

    try:
        return _ROWS_ADAPTER.validate_python(payload)
    except ValidationError as e:
        raise RenderError(f"Cannot render results table: malformed result rows ({e.error_count()} errors)") from e


def _cell(value: CellValue) -> str:
    if value is None:
        return "<td></td>"
    return f"<td>{html.escape(str(value))}</td>"


def render_result_row(index: int, row: SubjectResultRow) -> str:
    """Render one table row; ``index`` is the 1-based serial number."""
    cells = [
        f"<td>{index}</td>",
        _cell(row.subjectCODE),
        _cell(row.subjectName),
        _cell(row.subjectTP),
        _cell(row.subjectCredits),
        _cell(row.grade),
    ]
    return f"            <tr>{''.join(cells)}</tr>"


def render_results_table(rows: list[SubjectResultRow]) -> str:
    """Render a complete HTML document with one table row per subject."""
    header = "".join(f"<th>{title}</th>" for title in TABLE_HEADERS)
    body = "\n".join(render_result_row(i, row) for i, row in enumerate(rows, start=1))
    return PAGE_TEMPLATE.format(header=header, rows=body)
