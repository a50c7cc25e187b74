"""Spreadsheet export and loading."""

from code_extractor.excel.export import ExportArtifact, ExportError, export_codes, materialize
from code_extractor.excel.loader import load_codes

__all__ = ["ExportArtifact", "ExportError", "export_codes", "materialize", "load_codes"]
