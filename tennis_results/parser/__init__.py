# tennis_results/parser/__init__.py
"""tennis_results.parser: извлечение встроенных данных из HTML страниц результатов."""

from tennis_results.parser.next_data import extract_next_data, html_hints

__all__ = ["extract_next_data", "html_hints"]
