"""
EntPass Shared Module
=====================

Configuration, logging, console output and math helpers shared by the
EntPass command-line tool and its generation core.
"""

from shared.config import EntPassConfig

__all__ = ["EntPassConfig"]
