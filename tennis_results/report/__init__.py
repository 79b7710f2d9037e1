# File: tennis_results/report/__init__.py
"""tennis_results.report: сериализация состояния в файл, используемая пайплайном и тестами."""

from tennis_results.report.json_report import render_json

__all__ = ["render_json"]
