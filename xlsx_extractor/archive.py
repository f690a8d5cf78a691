from __future__ import annotations

__all__ = ["XlsxArchive", "unzip"]

import logging
import zlib
from functools import cached_property
from pathlib import Path
from typing import TYPE_CHECKING
from zipfile import BadZipFile, ZipFile

from .errors import ArchiveError

if TYPE_CHECKING:
    from typing import IO

    from typing_extensions import Self

logger = logging.getLogger(__name__)


class XlsxArchive:
    """Read-only view of the zip container behind a workbook"""

    __slots__ = ("__dict__", "path", "zf")

    def __init__(self, file: str | Path | IO[bytes]) -> None:
        self.path = str(Path(file).resolve()) if isinstance(file, (str, Path)) else "<stream>"

        try:
            self.zf: ZipFile | None = ZipFile(file)
        except FileNotFoundError as e:
            raise ArchiveError(self.path, "no such file") from e
        except (BadZipFile, OSError) as e:
            raise ArchiveError(self.path, f"not a zip archive ({e})") from e

        logger.debug("Opened %s (%d entries)", self.path, len(self.namelist))

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *_) -> None:  # noqa: ANN002
        self.close()

    def close(self) -> None:
        if self.zf is not None:
            self.zf.close()
            self.zf = None

    @cached_property
    def namelist(self) -> frozenset[str]:
        return frozenset(self._zf.namelist())

    @property
    def _zf(self) -> ZipFile:
        if self.zf is None:
            msg = "Archive is closed"
            raise RuntimeError(msg)
        return self.zf

    def has(self, name: str) -> bool:
        return name in self.namelist

    def read(self, name: str) -> bytes:
        if not self.has(name):
            raise ArchiveError(self.path, f"entry {name!r} not found")
        try:
            return self._zf.read(name)
        except (BadZipFile, OSError, zlib.error) as e:
            raise ArchiveError(self.path, f"cannot read entry {name!r} ({e})") from e


def unzip(file: str | Path | IO[bytes]) -> XlsxArchive:
    return XlsxArchive(file)
