__version__ = "1.0.0"

from .cell import EMPTY_SIZE, UNKNOWN_POSITION, Bounds, Cell, Position, Range, SheetSize
from .codec import column_name, get_position, num_of_column, parse_dimension
from .errors import ArchiveError, ExtractorError, WorkbookError, XmlDecodeError
from .extract import create_empty_cells, get_cells, get_sheet_size, place_cells
from .extractor import Sheet, XlsxExtractor, extract_file
from .richtext import flatten_run, flatten_string_item, flatten_text

__all__ = [
    "EMPTY_SIZE",
    "UNKNOWN_POSITION",
    "ArchiveError",
    "Bounds",
    "Cell",
    "ExtractorError",
    "Position",
    "Range",
    "Sheet",
    "SheetSize",
    "WorkbookError",
    "XlsxExtractor",
    "XmlDecodeError",
    "column_name",
    "create_empty_cells",
    "extract_file",
    "flatten_run",
    "flatten_string_item",
    "flatten_text",
    "get_cells",
    "get_position",
    "get_sheet_size",
    "num_of_column",
    "parse_dimension",
    "place_cells",
]
