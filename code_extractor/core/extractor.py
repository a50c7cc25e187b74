"""
Code extraction - pattern matching over plain-text documents.
"""

import re
from typing import List

# Runs of uppercase letters/digits, 10+ long, on ASCII word boundaries
CODE_PATTERN = re.compile(r"\b[A-Z0-9]{10,}\b", re.ASCII)


class DocumentReadError(Exception):
    """Raised when the selected text file cannot be read."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Could not read {path}: {reason}")
        self.path = path
        self.reason = reason


def extract_codes(text: str) -> List[str]:
    """
    Return every code in *text*, in document order.
    Duplicates are kept; an empty or code-free text gives an empty list.
    """
    if not text:
        return []
    return CODE_PATTERN.findall(text)


def read_document(path: str) -> str:
    """Read the whole file as UTF-8 text."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentReadError(path, str(e)) from e
