"""
Module: common

Purpose:
    Shared records used across the copy workflow.

Key Modules:
    - options: CopyOptions and selected-text placement
"""

from title_link_copy.common.options import CopyOptions, SelectedTextPlacement

__all__ = ["CopyOptions", "SelectedTextPlacement"]
