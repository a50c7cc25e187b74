"""GUI frame components."""

from code_extractor.gui.frames.upload import UploadFrame
from code_extractor.gui.frames.preview import PreviewFrame

__all__ = ["UploadFrame", "PreviewFrame"]
