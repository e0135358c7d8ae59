"""
HTML page renderer for the pairings publisher.

Produces two self-contained documents: the pairings table for the latest
round and a placeholder shown while no tournament data is available.
"""

import os
import logging
from typing import Iterable

from models.tournament import PageRow
from utils.text_utils import TextUtils

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "Turniej"
TABLE_LABEL = "Stół"
PLAYER1_LABEL = "Gracz 1"
PLAYER2_LABEL = "Gracz 2"

STANDINGS_STYLE = """    body {
      font-family: 'Segoe UI', Tahoma, Geneva, Verdana, sans-serif;
      margin: 0;
      padding: 0;
      background: #f9f9f9;
      color: #333;
    }
    header {
      background: #004466;
      color: white;
      padding: 20px;
      text-align: center;
    }
    h1 {
      font-size: 1.8em;
      margin: 0;
    }
    main {
      padding: 20px;
    }
    table {
      width: 100%;
      border-collapse: collapse;
      margin-top: 10px;
    }
    th, td {
      border: 1px solid #ddd;
      padding: 12px 8px;
      text-align: left;
      font-size: 1em;
    }
    th {
      background: #eeeeee;
    }
    tr:nth-child(even) {
      background: #fafafa;
    }
    @media (max-width: 600px) {
      table, thead, tbody, th, td, tr {
        display: block;
      }
      thead {
        display: none;
      }
      tr {
        margin-bottom: 15px;
        background: white;
        padding: 10px;
        border: 1px solid #ddd;
        border-radius: 8px;
      }
      td {
        padding: 8px 10px;
        text-align: right;
        position: relative;
      }
      td::before {
        content: attr(data-label);
        position: absolute;
        left: 10px;
        top: 8px;
        font-weight: bold;
        text-align: left;
      }
    }
"""

WAITING_PAGE = """<!DOCTYPE html>
<html lang="pl">
<head>
  <meta charset="UTF-8" />
  <meta name="viewport" content="width=device-width, initial-scale=1.0" />
  <title>Oczekiwanie na dane</title>
  <style>
    body {
      font-family: 'Segoe UI', Tahoma, Geneva, Verdana, sans-serif;
      display: flex;
      justify-content: center;
      align-items: center;
      min-height: 100vh;
      margin: 0;
      background-color: #f2f2f2;
      color: #333;
      text-align: center;
      padding: 20px;
    }
    .message {
      background: white;
      padding: 30px 20px;
      border-radius: 10px;
      box-shadow: 0 0 10px rgba(0,0,0,0.1);
    }
    h1 {
      font-size: 1.6em;
    }
  </style>
</head>
<body>
  <div class="message">
    <h1>Oczekiwanie na dane turniejowe...</h1>
    <p>Plik XML jest pusty lub jeszcze nie został wygenerowany.</p>
  </div>
</body>
</html>
"""


class PageRenderer:
    """Renders the pairings page and the waiting placeholder."""

    @staticmethod
    def render_standings(tournament_name: str, rows: Iterable[PageRow]) -> str:
        """
        Render the pairings table for one round.

        All text is escaped, so names containing markup characters cannot
        break the table structure.
        """
        title = TextUtils.escape_html(tournament_name) or DEFAULT_TITLE
        body_rows = "\n".join(PageRenderer._render_row(row) for row in rows)

        return f"""<!DOCTYPE html>
<html lang="pl">
<head>
  <meta charset="UTF-8" />
  <meta name="viewport" content="width=device-width, initial-scale=1.0" />
  <title>{title}</title>
  <style>
{STANDINGS_STYLE}  </style>
</head>
<body>
  <header><h1>{title}</h1></header>
  <main>
    <table>
      <thead>
        <tr><th>{TABLE_LABEL}</th><th>{PLAYER1_LABEL}</th><th>{PLAYER2_LABEL}</th></tr>
      </thead>
      <tbody>
{body_rows}
      </tbody>
    </table>
  </main>
</body>
</html>
"""

    @staticmethod
    def _render_row(row: PageRow) -> str:
        return (
            "        <tr>"
            f"<td data-label=\"{TABLE_LABEL}\">{TextUtils.escape_html(row.table_label)}</td>"
            f"<td data-label=\"{PLAYER1_LABEL}\">{TextUtils.escape_html(row.player1_name)}</td>"
            f"<td data-label=\"{PLAYER2_LABEL}\">{TextUtils.escape_html(row.player2_name)}</td>"
            "</tr>"
        )

    @staticmethod
    def render_waiting() -> str:
        """Placeholder page shown while no usable tournament data exists."""
        return WAITING_PAGE

    @staticmethod
    def write_page(html: str, output_file: str) -> str:
        """Write the document as UTF-8, replacing any previous file."""
        directory = os.path.dirname(output_file)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(output_file, 'w', encoding='utf-8') as f:
            f.write(html)
        logger.info(f"Wrote page to {output_file}")
        return output_file
