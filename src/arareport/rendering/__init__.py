# topmark:header:start
#
#   project      : AraReport
#   file         : __init__.py
#   file_relpath : src/arareport/rendering/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 AraReport contributors
#
# topmark:header:end

"""Rendering engine for AraReport.

This package turns reports into source-anchored text. Modules are layered
bottom-up and kept free of import cycles with the data model.

Public modules:
    - arareport.rendering.position: byte offsets to line/column, display widths
    - arareport.rendering.excerpt: excerpt line selection with context
    - arareport.rendering.layout: marker rows and multi-line rails
    - arareport.rendering.emitter: composition of issues and footers
    - arareport.rendering.writer: output sinks
    - arareport.rendering.color: color decision per sink
    - arareport.rendering.colored_enum: colorizers and the colored enum base

"""

from __future__ import annotations
