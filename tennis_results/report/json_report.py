# tennis_results/report/json_report.py

"""
Запись состояния tennis_results в JSON-файл.

Текст собирается целиком до открытия файла: ошибка сериализации не
затирает предыдущее состояние. Сама запись прямая (не атомарная);
ошибки записи не перехватываются и завершают запуск.
"""
import json
import re
from pathlib import Path

from tennis_results.models import PersistedState

# одиночные суррогаты из "\ud83d" в исходном JSON; в UTF-8 не кодируются
_LONE_SURROGATE_RE = re.compile("[\ud800-\udfff]")


def _escape_surrogates(text: str) -> str:
    return _LONE_SURROGATE_RE.sub(lambda m: f"\\u{ord(m.group()):04x}", text)


def dump_state(state: PersistedState) -> str:
    """
    Сериализует state: отступ 2, Unicode без экранирования, перевод строки в конце.

    NaN и Infinity не допускаются (ValueError), одиночные суррогаты
    записываются как escape-последовательности ``\\uXXXX``.
    """
    text = json.dumps(state.to_dict(), ensure_ascii=False, indent=2, allow_nan=False)
    return _escape_surrogates(text) + "\n"


def render_json(state: PersistedState, output_path: Path | str) -> Path:
    """
    Сохраняет state в формате JSON по указанному пути.

    :param state: объект PersistedState после слияния результатов запуска
    :param output_path: путь к JSON-файлу
    :return: Path сохранённого файла

    Пример:
    ```python
    from tennis_results.report.json_report import render_json
    saved = render_json(state, 'data/results.json')
    print(f"Wrote {saved}")
    ```
    """
    text = dump_state(state)

    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text, encoding="utf-8")

    return output
