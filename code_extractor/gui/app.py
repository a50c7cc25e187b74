"""Main Code Extractor GUI Application."""

import tkinter as tk
from tkinter import ttk, messagebox

from code_extractor.config.manager import ConfigManager
from code_extractor.core.session import SessionState
from code_extractor.excel.export import ExportError
from code_extractor.gui.constants import THEME
from code_extractor.gui.frames.preview import PreviewFrame
from code_extractor.gui.frames.upload import UploadFrame


def _apply_theme(style: ttk.Style) -> None:
    """Apply modern minimal theme to ttk widgets."""
    panel = THEME["bg_panel"]
    card = THEME["bg_card"]
    purple = THEME["purple"]
    purple_light = THEME["purple_light"]
    purple_dim = THEME["purple_dim"]
    text = THEME["text"]
    border = THEME["border"]

    style.configure(".", background=panel, foreground=text, font=("Segoe UI", 10))
    style.configure("TFrame", background=panel)
    style.configure("TLabel", background=panel, foreground=text)

    style.configure("TLabelframe", background=panel, foreground=text, bordercolor=border)
    style.configure(
        "TLabelframe.Label", background=panel, foreground=THEME["text_secondary"],
        font=("Segoe UI", 9, "bold"),
    )

    style.configure("TButton", background=card, foreground=purple, padding=(12, 6))
    style.map("TButton", background=[("active", border)], foreground=[("active", purple)])

    # Accent button - filled purple for primary actions
    style.configure(
        "Accent.TButton",
        background=purple, foreground="white",
        padding=(20, 10), font=("Segoe UI", 11, "bold"),
    )
    style.map(
        "Accent.TButton",
        background=[("active", purple_light), ("disabled", purple_dim)],
        foreground=[("disabled", panel)],
    )

    # Grid cells - flat, monospace so codes line up
    style.configure(
        "Cell.TButton", background=card, foreground=text,
        padding=(6, 4), font=("Consolas", 10),
    )
    style.map(
        "Cell.TButton",
        background=[("active", THEME["purple_dim"]), ("disabled", card)],
        foreground=[("disabled", THEME["text_muted"])],
    )

    style.configure("Vertical.TScrollbar", troughcolor=card, background=border)

    style.configure("Muted.TLabel", foreground=THEME["text_muted"], font=("Segoe UI", 9))
    style.configure("Secondary.TLabel", foreground=THEME["text_secondary"])
    style.configure("Heading.TLabel", foreground=text, font=("Segoe UI", 11, "bold"))


class CodeExtractorApp:
    """Main Code Extractor GUI Application."""

    def __init__(self, config_path=None):
        self.config_manager = ConfigManager(config_path)
        self.session = SessionState(
            export_filename=self.config_manager.get("export_filename"),
            sheet_name=self.config_manager.get("sheet_name"),
            log_callback=self.log_message,
        )
        self.root = tk.Tk()
        self.setup_window()
        self.setup_ui()

    def setup_window(self):
        self.root.title("Code Extractor")
        self.root.geometry("1100x560")
        self.root.minsize(820, 460)

        style = ttk.Style()
        if "clam" in style.theme_names():
            style.theme_use("clam")
        _apply_theme(style)

        self.root.configure(bg=THEME["bg"])
        self.root.protocol("WM_DELETE_WINDOW", self.on_closing)

    def setup_ui(self):
        main = ttk.Frame(self.root, padding=20)
        main.pack(fill="both", expand=True)
        main.columnconfigure(0, weight=2)
        main.columnconfigure(1, weight=5)
        main.rowconfigure(1, weight=1)

        tk.Label(
            main, text="Code Extractor",
            font=("Segoe UI", 20, "bold"),
            fg=THEME["purple"], bg=THEME["bg_panel"],
        ).grid(row=0, column=0, columnspan=2, sticky="w", pady=(0, 20))

        # Left: file + actions, right: grid preview
        self.upload_frame = UploadFrame(
            main, self.session, self.config_manager, self.refresh,
        )
        self.upload_frame.grid(row=1, column=0, sticky="nsew", padx=(0, 16))

        self.preview_frame = PreviewFrame(
            main,
            rows=self.config_manager.grid_rows,
            columns=self.config_manager.grid_columns,
            on_remove=self.remove_code,
        )
        self.preview_frame.grid(row=1, column=1, sticky="nsew")

    def log_message(self, message: str):
        # The session may log before the frames exist
        if hasattr(self, "upload_frame"):
            self.upload_frame.log_message(message)
        else:
            print(message)

    def refresh(self, enabled: bool = True):
        """Re-render the preview and the download button from the session."""
        self.preview_frame.refresh(self.session.codes, enabled=enabled)
        self.upload_frame.update_download_state()

    def remove_code(self, value: str):
        if self.upload_frame.is_processing:
            return
        try:
            self.session.remove_code(value)
        except ExportError as e:
            self.log_message(f"Error processing file: {e}")
            messagebox.showerror("Error", f"Failed to rebuild spreadsheet:\n{e}")
        self.refresh()

    def on_closing(self):
        self.session.clear()
        self.root.destroy()

    def run(self):
        self.root.mainloop()
