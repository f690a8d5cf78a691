from __future__ import annotations

__all__ = [
    "ArchiveError",
    "ExtractorError",
    "WorkbookError",
    "XmlDecodeError",
]


class ExtractorError(Exception):
    """Base class for every failure surfaced by the extractor"""


class ArchiveError(ExtractorError):
    """File is missing, unreadable, not a zip container, or lacks a requested entry"""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class XmlDecodeError(ExtractorError):
    """An XML document inside the archive is malformed"""

    def __init__(self, entry: str, reason: str) -> None:
        super().__init__(f"{entry}: {reason}")
        self.entry = entry
        self.reason = reason


class WorkbookError(ExtractorError):
    """Archive is a zip file, but not a workbook"""
