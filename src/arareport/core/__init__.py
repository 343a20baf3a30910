# topmark:header:start
#
#   project      : AraReport
#   file         : __init__.py
#   file_relpath : src/arareport/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 AraReport contributors
#
# topmark:header:end

"""Rendering-independent building blocks shared by the config and model layers."""

from __future__ import annotations
