# File: tennis_results/summarizer.py
"""tennis_results.summarizer: краткая сводка произвольного JSON для отладочного вывода.

Вложенные объекты и массивы не обходятся рекурсивно, а заменяются
строкой-описанием, поэтому размер сводки ограничен независимо от
глубины и ширины исходных данных.
"""

from __future__ import annotations

from functools import singledispatch
from typing import Any, Dict, List, Sequence

from tennis_results.models import JSONValue

__all__: Sequence[str] = ("summarize", "describe", "TRUNCATED_MARKER", "MAX_CHILD_KEYS")

TRUNCATED_MARKER = "__truncated__"
MAX_CHILD_KEYS = 12
DEFAULT_MAX_KEYS = 80


@singledispatch
def describe(value: Any) -> JSONValue:
    """Значение поля в сводке: скаляры без изменений."""
    return value


@describe.register(dict)
def _(value: dict) -> JSONValue:
    keys = list(value)
    names = ", ".join(str(k) for k in keys[:MAX_CHILD_KEYS])
    more = ", …" if len(keys) > MAX_CHILD_KEYS else ""
    return f"{{object keys={names}{more}}}"


@describe.register(list)
def _(value: list) -> JSONValue:
    return f"[array len={len(value)}]"


@singledispatch
def _entries(value: Any) -> List[tuple[str, JSONValue]] | None:
    return None


@_entries.register(dict)
def _(value: dict) -> List[tuple[str, JSONValue]]:
    return list(value.items())


@_entries.register(list)
def _(value: list) -> List[tuple[str, JSONValue]]:
    # у массива ключами служат индексы
    return [(str(i), v) for i, v in enumerate(value)]


def summarize(value: JSONValue, max_keys: int = DEFAULT_MAX_KEYS) -> JSONValue:
    """Возвращает первые max_keys полей объекта с описаниями вложенных значений.

    Скаляры и ``None`` возвращаются как есть. Если полей больше max_keys,
    в сводку добавляется ``__truncated__: True``.

    Пример:
    ```python
    summarize({"a": {"x": 1, "y": 2}, "b": [1, 2, 3], "c": 5})
    # {'a': '{object keys=x, y}', 'b': '[array len=3]', 'c': 5}
    ```
    """
    entries = _entries(value)
    if entries is None:
        return value
    out: Dict[str, JSONValue] = {key: describe(v) for key, v in entries[:max_keys]}
    if len(entries) > max_keys:
        out[TRUNCATED_MARKER] = True
    return out
