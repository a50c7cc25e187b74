"""
Session state - the selected file, the current code list and its export.

All changes to the code list go through ``replace_codes`` and ``remove_code``,
which rebuild the export before committing. The held artifact therefore always
matches the list; a failed export leaves both untouched.
"""

import os
from typing import Callable, List, Optional, Sequence

from code_extractor.core.extractor import DocumentReadError, extract_codes, read_document
from code_extractor.core.grid import (
    DEFAULT_COLUMNS,
    DEFAULT_ROWS,
    build_grid,
    remove_code,
)
from code_extractor.excel.export import (
    DEFAULT_FILENAME,
    DEFAULT_SHEET_NAME,
    ExportArtifact,
    ExportError,
    export_codes,
    materialize,
)


def _plural(count: int, word: str = "code") -> str:
    return f"{count} {word}{'s' if count != 1 else ''}"


class SessionState:
    """Owns the input file, the code list and the current export artifact."""

    def __init__(
        self,
        export_filename: str = DEFAULT_FILENAME,
        sheet_name: str = DEFAULT_SHEET_NAME,
        log_callback: Optional[Callable[[str], None]] = None,
    ):
        self.export_filename = export_filename
        self.sheet_name = sheet_name
        self.log = log_callback or print
        self.file_path: Optional[str] = None
        self.busy = False
        self._codes: List[str] = []
        self._artifact: Optional[ExportArtifact] = None

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    @property
    def codes(self) -> List[str]:
        return list(self._codes)

    @property
    def artifact(self) -> Optional[ExportArtifact]:
        return self._artifact

    @property
    def has_artifact(self) -> bool:
        return self._artifact is not None

    def grid(self, rows: int = DEFAULT_ROWS, columns: int = DEFAULT_COLUMNS):
        return build_grid(self._codes, rows, columns)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def select_file(self, path: str) -> None:
        self.file_path = path
        self.log(f"Selected file: {os.path.basename(path)}")

    def set_artifact(self, artifact: Optional[ExportArtifact]) -> None:
        """Install *artifact*, releasing the one it supersedes."""
        previous = self._artifact
        self._artifact = artifact
        if previous is not None and previous is not artifact:
            previous.release()

    def _export(self, codes: Sequence[str]) -> Optional[ExportArtifact]:
        return export_codes(codes, filename=self.export_filename, sheet_name=self.sheet_name)

    def replace_codes(self, codes: Sequence[str]) -> None:
        """Replace the whole list and regenerate the export."""
        new_codes = list(codes)
        artifact = self._export(new_codes)
        self._codes = new_codes
        self.set_artifact(artifact)
        if artifact is None:
            self.log("No codes; download disabled")
        else:
            self.log(f"Spreadsheet ready: {_plural(artifact.row_count, 'row')}")

    def remove_code(self, value: str) -> int:
        """Remove every occurrence of *value*. Returns how many were removed."""
        new_codes = remove_code(self._codes, value)
        removed = len(self._codes) - len(new_codes)
        if not removed:
            return 0
        self.log(f"Removed {value} ({removed}x), {_plural(len(new_codes))} left")
        self.replace_codes(new_codes)
        return removed

    def extract(self) -> bool:
        """
        Read the selected file, extract its codes and export them.
        Returns False (state unchanged) when busy, when no file is selected,
        or when reading or exporting fails.
        """
        if self.busy:
            self.log("Extraction already in progress")
            return False
        if not self.file_path:
            self.log("ERROR: Please select a text file first")
            return False

        self.busy = True
        try:
            text = read_document(self.file_path)
            codes = extract_codes(text)
            self.log(f"Found {_plural(len(codes))} in {os.path.basename(self.file_path)}")
            self.replace_codes(codes)
            return True
        except (DocumentReadError, ExportError) as e:
            self.log(f"Error processing file: {e}")
            return False
        finally:
            self.busy = False

    def download(self, directory: str) -> Optional[str]:
        """Save the current artifact into *directory*. No-op without one."""
        if self._artifact is None:
            return None
        path = materialize(self._artifact, directory)
        self.log(f"Saved: {path}")
        return path

    def clear(self) -> None:
        """Forget the file and the codes, releasing the export."""
        self.file_path = None
        self._codes = []
        self.set_artifact(None)
