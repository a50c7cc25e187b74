"""Extract codes from text files and export them to a spreadsheet."""

__version__ = "1.0.0"
