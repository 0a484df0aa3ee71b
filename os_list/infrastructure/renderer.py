from typing import Dict, Optional, Sequence

from rich.console import Console
from rich.table import Table
from rich.text import Text

from os_list.domain.models import Cell, ColorClass, ReportRow

COLOR_STYLES: Dict[ColorClass, str] = {
    ColorClass.RED: "#ff4444",
    ColorClass.AMBER: "#ffbb33",
    ColorClass.GREEN: "#00C851",
    ColorClass.BLUE: "#33b5e5",
}


def to_text(cell: Cell) -> Text:
    text = Text()
    for span in cell.spans:
        text.append(span.text, style=COLOR_STYLES[span.color] if span.color else None)
    return text


class TableRenderer:
    """
    Prints report rows as a rich table.
    """

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def render(
        self,
        headers: Sequence[str],
        rows: Sequence[ReportRow],
        widths: Sequence[int],
        separate_rows: bool = False,
    ) -> None:
        """
        Args:
            headers (Sequence[str]): Column titles.
            rows (Sequence[ReportRow]): Rows with one cell per header.
            widths (Sequence[int]): Width hint per column.
            separate_rows (bool): Draw a separator line between rows.
        """
        table = Table(show_lines=separate_rows)
        for header, width in zip(headers, widths):
            table.add_column(header, width=width, overflow="fold")

        for row in rows:
            table.add_row(*(to_text(cell) for cell in row.cells))

        self.console.print(table)
