"""
------------------------------------------------------------------------------
Project:        VietDoc
File:           vietdoc/exceptions.py
Version:        1.0.0
Description:    Exception hierarchy for the export pipeline. Unknown format
                ids are not errors and have no exception type.
------------------------------------------------------------------------------
"""


class VietDocError(Exception):
    """Base class for all VietDoc errors."""


class ExportError(VietDocError):
    """An export did not complete. No partial payload is produced."""


class CaptureFailure(ExportError):
    """The preview surface is unavailable or has zero extent at capture time."""


class EncodingFailure(ExportError):
    """Rasterization succeeded but PNG/PDF serialization failed."""


class ExportBusyError(ExportError):
    """Another export is already in flight against the preview surface."""
