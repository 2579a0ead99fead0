"""Excel workbook facades.

This package wraps workbook resources of the Graph API:
- workbook.py: Workbook with worksheets, tables and session lifecycle
- worksheet.py: Worksheet with ranges and tables
- table.py: Table rows, columns and headers
- range.py: Cell range values
- named_items.py: Named items shared by workbooks and worksheets
- tables.py: Table listing and creation shared by workbooks and worksheets
- models.py: Data models
"""

from .models import NamedItem
from .named_items import NamedItemContainer
from .range import Range
from .table import Table
from .tables import TableContainerMixin
from .workbook import Workbook
from .worksheet import Worksheet

__all__ = [
    "Workbook",
    "Worksheet",
    "Table",
    "Range",
    "NamedItem",
    "NamedItemContainer",
    "TableContainerMixin",
]
