# File: site_harvest/report/__init__.py
"""site_harvest.report: Генерация отчётов об обходе (JSON и HTML) для CLI и тестов."""

from .html_report import render_html
from .json_report import render_json

__all__ = ["render_json", "render_html"]
