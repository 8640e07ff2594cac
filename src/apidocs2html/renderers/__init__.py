#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/apidocs2html/renderers/__init__.py
"""Renderers turning the document model into output files."""

from apidocs2html.renderers.html import ExportSummary, HtmlExporter, TemplateLayout, scan_template

__all__ = ["ExportSummary", "HtmlExporter", "TemplateLayout", "scan_template"]
