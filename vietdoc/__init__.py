"""
------------------------------------------------------------------------------
Project:        VietDoc
File:           vietdoc/__init__.py
Version:        1.0.0
Description:    Core package for VietDoc. Contains the format resolver, the
                document renderer, the page painter and the export pipeline.
------------------------------------------------------------------------------
"""

__version__ = "1.0.0"
