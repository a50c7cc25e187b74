"""Preview frame showing the code list as a fixed grid of removable cells."""

from typing import Callable, List, Sequence

from tkinter import ttk

from code_extractor.core.grid import build_grid, hidden_count
from code_extractor.gui.constants import CELL_WIDTH, PLACEHOLDER_CELL


class PreviewFrame(ttk.Frame):
    """Grid preview; clicking a code removes every copy of it."""

    def __init__(self, parent, rows: int, columns: int, on_remove: Callable[[str], None]):
        super().__init__(parent)
        self.rows = rows
        self.columns = columns
        self.on_remove = on_remove
        self.cells: List[List[ttk.Button]] = []
        self.setup_ui()

    def setup_ui(self):
        header_row = ttk.Frame(self)
        header_row.pack(fill="x", pady=(0, 8))

        ttk.Label(header_row, text="Preview", style="Heading.TLabel").pack(side="left")
        ttk.Label(
            header_row, text="Click a code to remove it", style="Muted.TLabel",
        ).pack(side="right")

        grid_frame = ttk.Frame(self)
        grid_frame.pack(fill="both", expand=True)
        for column in range(self.columns):
            grid_frame.columnconfigure(column, weight=1)

        for row in range(self.rows):
            line = []
            for column in range(self.columns):
                cell = ttk.Button(
                    grid_frame, text=PLACEHOLDER_CELL, width=CELL_WIDTH,
                    style="Cell.TButton", state="disabled",
                )
                cell.grid(row=row, column=column, sticky="nsew", padx=1, pady=1)
                line.append(cell)
            self.cells.append(line)

        footer = ttk.Frame(self)
        footer.pack(fill="x", pady=(8, 0))
        self.total_label = ttk.Label(footer, text="Total: 0 codes", style="Secondary.TLabel")
        self.total_label.pack(side="right")
        self.hidden_label = ttk.Label(footer, text="", style="Muted.TLabel")
        self.hidden_label.pack(side="left")

    def refresh(self, codes: Sequence[str], enabled: bool = True):
        """Redraw every cell from *codes*."""
        grid = build_grid(codes, self.rows, self.columns)
        for row, line in enumerate(grid):
            for column, code in enumerate(line):
                cell = self.cells[row][column]
                if code is None:
                    cell.config(text=PLACEHOLDER_CELL, state="disabled", command="")
                else:
                    cell.config(
                        text=code,
                        state="normal" if enabled else "disabled",
                        command=lambda value=code: self.on_remove(value),
                    )

        count = len(codes)
        self.total_label.config(text=f"Total: {count} code{'s' if count != 1 else ''}")
        hidden = hidden_count(count, self.rows, self.columns)
        self.hidden_label.config(text=f"+{hidden} more not shown" if hidden else "")
