# File: robots_scout/report/__init__.py
"""robots_scout.report: Отчёты по разобранному robots.txt."""

from .json_report import document_to_dict, render_json

__all__ = ["document_to_dict", "render_json"]
