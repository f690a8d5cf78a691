from __future__ import annotations

from pathlib import Path
from typing import Callable, Dict, Optional
from zipfile import ZIP_DEFLATED, ZipFile

import pytest

NS = 'xmlns="http://schemas.openxmlformats.org/spreadsheetml/2006/main"'
PKG_NS = 'xmlns="http://schemas.openxmlformats.org/package/2006/relationships"'
REL_TYPE = "http://schemas.openxmlformats.org/officeDocument/2006/relationships"

BookFactory = Callable[..., Path]


@pytest.fixture
def make_book(tmp_path: Path) -> BookFactory:
    """Write a minimal workbook: `sheets` maps sheet names to worksheet XML"""

    def factory(
        sheets: Dict[str, str],
        sst: Optional[str] = None,
        *,
        with_rels: bool = True,
        rel_prefix: str = "r",
        name: str = "book.xlsx",
    ) -> Path:
        path = tmp_path / name
        book = "".join(
            f'<sheet name="{x}" sheetId="{i}" {rel_prefix}:id="rId{i}"/>'
            for i, x in enumerate(sheets, start=1)
        )
        rels = "".join(
            f'<Relationship Id="rId{i}" Type="{REL_TYPE}/worksheet" '
            f'Target="worksheets/sheet{i}.xml"/>'
            for i in range(1, len(sheets) + 1)
        )
        with ZipFile(path, "w", ZIP_DEFLATED) as zf:
            zf.writestr(
                "xl/workbook.xml",
                f'<workbook {NS} xmlns:{rel_prefix}="{REL_TYPE}"><sheets>{book}</sheets></workbook>',
            )
            if with_rels:
                zf.writestr("xl/_rels/workbook.xml.rels", f"<Relationships {PKG_NS}>{rels}</Relationships>")
            for i, xml in enumerate(sheets.values(), start=1):
                zf.writestr(f"xl/worksheets/sheet{i}.xml", xml)
            if sst is not None:
                zf.writestr("xl/sharedStrings.xml", sst)
        return path

    return factory
