"""
Common constants for XLSX extraction.

Archive entries are addressed by their path inside the zip container. Cell type
codes mirror the `t` attribute of a `<c>` element; an absent attribute means a
number (or a cell without value) and is carried as an empty string.

TYPE_SHARED -> value is an index into the shared-string table
TYPE_INLINE -> value lives in an `<is>` rich-text element instead of `<v>`
TYPE_FORMULA_STR -> value is the cached string result of a formula
"""


__all__ = [
    "ALPHABET_BASE",
    "ALPHABET_SIZE",
    "REL_ID_ATTRS",
    "REL_NS",
    "REL_NS_STRICT",
    "SHARED_STRINGS_PATH",
    "TYPE_BOOLEAN",
    "TYPE_ERROR",
    "TYPE_FORMULA_STR",
    "TYPE_INLINE",
    "TYPE_NUMBER",
    "TYPE_SHARED",
    "WORKBOOK_PATH",
    "WORKBOOK_RELS_PATH",
    "WORKSHEET_PATH",
    "XML_SPACE_ATTR",
]

WORKBOOK_PATH = "xl/workbook.xml"
WORKBOOK_RELS_PATH = "xl/_rels/workbook.xml.rels"
SHARED_STRINGS_PATH = "xl/sharedStrings.xml"
WORKSHEET_PATH = "xl/worksheets/sheet{}.xml"

TYPE_NUMBER = ""
TYPE_SHARED = "s"
TYPE_INLINE = "inlineStr"
TYPE_FORMULA_STR = "str"
TYPE_BOOLEAN = "b"
TYPE_ERROR = "e"

# Column letters are a bijective base-26 numeral: "A" == 1, "Z" == 26, "AA" == 27
ALPHABET_SIZE = 26
ALPHABET_BASE = ord("A") - 1

# Namespaced attribute names as the XML adapter reports them: "{uri}local"
REL_NS = "http://schemas.openxmlformats.org/officeDocument/2006/relationships"
REL_NS_STRICT = "http://purl.oclc.org/ooxml/officeDocument/relationships"
REL_ID_ATTRS = (f"{{{REL_NS}}}id", f"{{{REL_NS_STRICT}}}id")
XML_SPACE_ATTR = "{http://www.w3.org/XML/1998/namespace}space"
