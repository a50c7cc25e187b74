"""Upload frame: file selection, extraction, download and the log pane."""

import os
import subprocess
import sys
import threading
from datetime import datetime

import tkinter as tk
from tkinter import ttk, filedialog, messagebox, scrolledtext

from code_extractor.excel.export import ExportError
from code_extractor.gui.constants import (
    DOWNLOAD_LABEL,
    EXTRACT_BUSY_LABEL,
    EXTRACT_LABEL,
    TEXT_FILE_TYPES,
    THEME,
)


def _open_folder(path: str) -> None:
    if os.name == "nt":
        os.startfile(path)
    elif sys.platform == "darwin":
        subprocess.Popen(["open", path])
    else:
        subprocess.Popen(["xdg-open", path])


class UploadFrame(ttk.Frame):
    """Frame for picking the text file and driving extraction/download."""

    def __init__(self, parent, session, config_manager, on_codes_changed):
        super().__init__(parent)
        self.session = session
        self.config_manager = config_manager
        self.on_codes_changed = on_codes_changed
        self.is_processing = False
        self.setup_ui()

    def setup_ui(self):
        ttk.Label(self, text="Attach Text File", style="Heading.TLabel").pack(anchor="w")
        ttk.Label(
            self,
            text="Attach a text file to extract its codes into an Excel spreadsheet",
            style="Muted.TLabel",
        ).pack(anchor="w", pady=(0, 12))

        file_row = ttk.Frame(self)
        file_row.pack(fill="x", pady=(0, 12))
        file_row.columnconfigure(0, weight=1)

        self.file_var = tk.StringVar(value="No file selected")
        ttk.Label(
            file_row, textvariable=self.file_var, style="Muted.TLabel",
        ).grid(row=0, column=0, sticky="ew", padx=(0, 8))
        ttk.Button(file_row, text="Browse", command=self.select_file).grid(row=0, column=1)

        self.extract_button = ttk.Button(
            self, text=EXTRACT_LABEL, style="Accent.TButton", command=self.start_extraction,
        )
        self.extract_button.pack(fill="x", pady=(0, 8))

        # Packed only while a spreadsheet is available
        self.download_button = ttk.Button(
            self, text=DOWNLOAD_LABEL, command=self.download,
        )

        output_frame = ttk.LabelFrame(self, text="Log", padding=5)
        output_frame.pack(fill="both", expand=True, pady=(8, 0))
        self.output_text = scrolledtext.ScrolledText(
            output_frame,
            height=8,
            wrap=tk.WORD,
            bg=THEME["bg_card"],
            fg=THEME["text"],
            insertbackground=THEME["purple"],
            font=("Consolas", 10),
            relief="flat",
        )
        self.output_text.pack(fill="both", expand=True)

    # ------------------------------------------------------------------
    # Log pane
    # ------------------------------------------------------------------

    def log_message(self, message: str):
        """Append a timestamped line; safe to call from the worker thread."""
        timestamp = datetime.now().strftime("%H:%M:%S")
        line = f"[{timestamp}] {message}\n"
        if threading.current_thread() is threading.main_thread():
            self._append_log(line)
        else:
            self.after(0, self._append_log, line)

    def _append_log(self, line: str):
        self.output_text.insert(tk.END, line)
        self.output_text.see(tk.END)

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def select_file(self):
        file_path = filedialog.askopenfilename(
            title="Select Text File", filetypes=TEXT_FILE_TYPES,
        )
        if file_path:
            self.file_var.set(os.path.basename(file_path))
            self.session.select_file(file_path)

    def start_extraction(self):
        if self.is_processing:
            return
        if not self.session.file_path:
            messagebox.showwarning("No File", "Please select a text file first")
            return

        self.is_processing = True
        self.extract_button.config(state="disabled", text=EXTRACT_BUSY_LABEL)
        self.on_codes_changed(enabled=False)

        thread = threading.Thread(target=self._run_extraction)
        thread.daemon = True
        thread.start()

    def _run_extraction(self):
        ok = self.session.extract()
        self.after(0, self._finish_extraction, ok)

    def _finish_extraction(self, ok: bool):
        self.is_processing = False
        self.extract_button.config(state="normal", text=EXTRACT_LABEL)
        self.on_codes_changed()
        if not ok:
            messagebox.showerror("Error", "Processing failed. See the log for details.")

    def update_download_state(self):
        """Show the download button only while an artifact is held."""
        if self.session.has_artifact and not self.is_processing:
            if not self.download_button.winfo_ismapped():
                self.download_button.pack(fill="x", pady=(0, 8), after=self.extract_button)
        else:
            self.download_button.pack_forget()

    def download(self):
        if not self.session.has_artifact:
            return
        output_dir = self.config_manager.get_output_dir()
        try:
            path = self.session.download(output_dir)
        except ExportError as e:
            self.log_message(f"Error saving spreadsheet: {e}")
            messagebox.showerror("Error", f"Failed to save spreadsheet:\n{e}")
            return
        try:
            _open_folder(os.path.dirname(path))
        except OSError as open_err:
            self.log_message(f"Info: Unable to open output folder: {open_err}")
