"""
------------------------------------------------------------------------------
Project:        VietDoc
File:           vietdoc/models/__init__.py
Version:        1.0.0
Description:    Package initializer for data models. Exports the document
                record, the style descriptor and the visual tree root.
------------------------------------------------------------------------------
"""

from .types import DocumentType, DOCUMENT_TITLES, PAYMENT_TYPES
from .document import DocumentRecord
from .style import StyleDescriptor, Border
from .visual import VisualTree

__all__ = [
    "DocumentType",
    "DOCUMENT_TITLES",
    "PAYMENT_TYPES",
    "DocumentRecord",
    "StyleDescriptor",
    "Border",
    "VisualTree",
]
