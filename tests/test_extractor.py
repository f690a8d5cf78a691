# ruff: noqa:S101, PLR2004
from __future__ import annotations

import asyncio
import io

import pytest

from xlsx_extractor import (
    ArchiveError,
    Bounds,
    Range,
    Sheet,
    SheetSize,
    WorkbookError,
    XlsxExtractor,
    XmlDecodeError,
    extract_file,
)

NS = 'xmlns="http://schemas.openxmlformats.org/spreadsheetml/2006/main"'


def worksheet(rows: str, dimension: str | None = None) -> str:
    dim = f'<dimension ref="{dimension}"/>' if dimension else ""
    return f"<worksheet {NS}>{dim}<sheetData>{rows}</sheetData></worksheet>"


SST = (
    f"<sst {NS}>"
    "<si><t>name</t></si>"
    '<si><r><t>rich </t></r><r><t xml:space="preserve"> text</t></r></si>'
    "</sst>"
)

FIRST = worksheet(
    '<row r="1"><c r="A1" t="s"><v>0</v></c><c r="B1" t="s"><v>1</v></c></row>'
    '<row r="3"><c r="A3"><v>42</v></c><c r="C3" t="inlineStr"><is><t>inline</t></is></c></row>',
    dimension="A1:C3",
)

SECOND = worksheet('<row r="2"><c r="B2" t="b"><v>1</v></c><c r="D2"><v>7</v></c></row>')

EMPTY = worksheet("")


def test_count_and_names(make_book) -> None:
    path = make_book({"First": FIRST, "Second": SECOND, "Empty": EMPTY}, SST)
    with XlsxExtractor(path) as book:
        assert book.count == 3
        assert [x.name for x in book.sheets] == ["First", "Second", "Empty"]
        assert [x.path for x in book.sheets] == [
            "xl/worksheets/sheet1.xml",
            "xl/worksheets/sheet2.xml",
            "xl/worksheets/sheet3.xml",
        ]


def test_extract_with_dimension(make_book) -> None:
    path = make_book({"First": FIRST}, SST)
    with XlsxExtractor(path) as book:
        sheet = asyncio.run(book.extract(1))

    assert sheet.index == 1
    assert sheet.name == "First"
    assert sheet.size == SheetSize(Bounds(1, 3), Bounds(1, 3))
    assert sheet.cells == [
        ["name", "rich  text", ""],
        ["", "", ""],
        ["42", "", "inline"],
    ]


def test_extract_inferred_size(make_book) -> None:
    path = make_book({"First": FIRST, "Second": SECOND}, SST)
    with XlsxExtractor(path) as book:
        sheet = asyncio.run(book.extract(2))

    assert sheet.size == SheetSize(Bounds(2, 2), Bounds(2, 4))
    assert sheet.cells == [["1", "", "7"]]


def test_extract_empty_sheet(make_book) -> None:
    path = make_book({"Empty": EMPTY})
    with XlsxExtractor(path) as book:
        sheet = asyncio.run(book.extract(1))

    assert sheet.size.is_empty
    assert sheet.cells == []
    assert sheet.to_arrow().num_columns == 0


def test_extract_out_of_range(make_book) -> None:
    path = make_book({"First": FIRST}, SST)
    with XlsxExtractor(path) as book:
        with pytest.raises(IndexError):
            asyncio.run(book.extract(0))
        with pytest.raises(IndexError):
            asyncio.run(book.extract(2))


def test_extract_all(make_book) -> None:
    path = make_book({"First": FIRST, "Second": SECOND, "Empty": EMPTY}, SST)
    with XlsxExtractor(path) as book:
        sheets = asyncio.run(book.extract_all())

    assert [x.name for x in sheets] == ["First", "Second", "Empty"]  # type: ignore[union-attr]


def test_extract_all_range(make_book) -> None:
    path = make_book({"First": FIRST, "Second": SECOND, "Empty": EMPTY}, SST)
    with XlsxExtractor(path) as book:
        assert [x.index for x in asyncio.run(book.extract_all(Range(2, 3)))] == [2, 3]  # type: ignore[union-attr]
        assert [x.index for x in asyncio.run(book.extract_all(Range(3, 9)))] == [3]  # type: ignore[union-attr]
        assert asyncio.run(book.extract_all(Range(5, 6))) == []


def test_extract_all_isolates_broken_sheet(make_book) -> None:
    path = make_book({"First": FIRST, "Broken": "<worksheet><sheetData>", "Second": SECOND}, SST)
    with XlsxExtractor(path) as book:
        results = asyncio.run(book.extract_all(return_exceptions=True))

        assert isinstance(results[0], Sheet)
        assert isinstance(results[1], XmlDecodeError)
        assert results[1].entry == "xl/worksheets/sheet2.xml"
        assert isinstance(results[2], Sheet)

        with pytest.raises(XmlDecodeError):
            asyncio.run(book.extract_all())


def test_no_shared_strings_part(make_book) -> None:
    path = make_book({"Second": SECOND})
    with XlsxExtractor(path) as book:
        assert asyncio.run(book.shared_strings()) == []


def test_without_relationships(make_book) -> None:
    path = make_book({"First": FIRST, "Second": SECOND}, SST, with_rels=False)
    with XlsxExtractor(path) as book:
        assert [x.path for x in book.sheets] == [
            "xl/worksheets/sheet1.xml",
            "xl/worksheets/sheet2.xml",
        ]
        assert asyncio.run(book.extract(2)).cells == [["1", "", "7"]]


def test_to_arrow(make_book) -> None:
    path = make_book({"Second": SECOND})
    [sheet] = extract_file(path)

    table = sheet.to_arrow()
    assert table.column_names == ["B", "C", "D"]
    assert table.num_rows == 1
    assert table.to_pylist() == [{"B": "1", "C": "", "D": "7"}]


def test_to_dict(make_book) -> None:
    path = make_book({"Second": SECOND})
    [sheet] = extract_file(path)
    assert sheet.to_dict() == {"id": 1, "name": "Second", "cells": [["1", "", "7"]]}


def test_missing_file(tmp_path) -> None:
    with pytest.raises(ArchiveError):
        XlsxExtractor(tmp_path / "missing.xlsx")


def test_not_a_zip(tmp_path) -> None:
    path = tmp_path / "plain.xlsx"
    path.write_text("not a zip")
    with pytest.raises(ArchiveError):
        XlsxExtractor(path)


def test_zip_without_workbook() -> None:
    import zipfile

    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w") as zf:
        zf.writestr("hello.txt", "hi")
    buf.seek(0)

    with pytest.raises(WorkbookError):
        XlsxExtractor(buf)


def test_relationship_prefix_is_not_fixed(make_book) -> None:
    path = make_book({"First": FIRST, "Second": SECOND}, SST, rel_prefix="rel")
    with XlsxExtractor(path) as book:
        assert book.count == 2
        assert asyncio.run(book.extract(2)).cells == [["1", "", "7"]]


def test_strict_relationship_namespace(tmp_path) -> None:
    import zipfile

    path = tmp_path / "strict.xlsx"
    with zipfile.ZipFile(path, "w") as zf:
        zf.writestr(
            "xl/workbook.xml",
            '<workbook xmlns="http://purl.oclc.org/ooxml/spreadsheetml/main" '
            'xmlns:r="http://purl.oclc.org/ooxml/officeDocument/relationships">'
            '<sheets><sheet name="Only" sheetId="1" r:id="rId7"/></sheets></workbook>',
        )
        zf.writestr(
            "xl/_rels/workbook.xml.rels",
            '<Relationships xmlns="http://schemas.openxmlformats.org/package/2006/relationships">'
            '<Relationship Id="rId7" '
            'Type="http://purl.oclc.org/ooxml/officeDocument/relationships/worksheet" '
            'Target="/xl/worksheets/data.xml"/></Relationships>',
        )
        zf.writestr("xl/worksheets/data.xml", SECOND)

    with XlsxExtractor(path) as book:
        assert [(x.name, x.path) for x in book.sheets] == [("Only", "xl/worksheets/data.xml")]
        assert asyncio.run(book.extract(1)).cells == [["1", "", "7"]]


def test_extract_reversed_dimension(make_book) -> None:
    path = make_book({"Reversed": worksheet('<row r="2"><c r="B2"><v>x</v></c></row>', "B2:A1")})
    [sheet] = extract_file(path)
    assert sheet.size == SheetSize(Bounds(1, 2), Bounds(1, 2))
    assert sheet.cells == [["", ""], ["", "x"]]
