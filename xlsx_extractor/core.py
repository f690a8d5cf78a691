from __future__ import annotations

__all__ = [
    "LOG_LEVEL",
    "SHOW_PROGRESS",
    "as_dataclass",
]

import os
from typing import TYPE_CHECKING

from recordclass import as_dataclass as _as_dataclass
from typing_extensions import dataclass_transform

if TYPE_CHECKING:
    from typing import Callable, TypeVar

    T = TypeVar("T")


SHOW_PROGRESS: bool = os.environ.get("XLSX_EXTRACTOR_PROGRESS", "0") == "1"
"Show a tqdm progress bar while extracting several sheets"

LOG_LEVEL: str = os.environ.get("XLSX_EXTRACTOR_LOG_LEVEL", "WARNING").upper()
"Default level for the command line logger"


@dataclass_transform()
def as_dataclass(
    cls: type[T] | None = None,
    *,
    hashable: bool = False,
    readonly: bool = False,
    fast_new: bool = True,
) -> Callable[[type[T]], type[T]]:
    if cls is not None:
        return _as_dataclass(
            hashable=hashable,
            readonly=readonly,
            fast_new=fast_new,
        )(cls)  # type: ignore

    def wrapper(cls: type[T]) -> type[T]:
        return _as_dataclass(
            hashable=hashable,
            readonly=readonly,
            fast_new=fast_new,
        )(cls)  # type: ignore

    return wrapper
