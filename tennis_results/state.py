# File: tennis_results/state.py
"""tennis_results.state: чтение сохранённого состояния и слияние результатов запуска."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Union

from tennis_results.logger import logger
from tennis_results.models import FetchRecord, PersistedState
from tennis_results.parser.next_data import reject_constant

__all__: Sequence[str] = ("load_state", "merge_run", "utc_timestamp")


def load_state(path: Union[str, Path]) -> PersistedState:
    """Читает состояние с диска; при любой ошибке возвращает пустое состояние.

    Отсутствующий или нечитаемый файл, битый JSON и JSON не-объект дают
    ``{lastUpdated: null, sources: [], matches: []}``. Функция не бросает исключений.
    """
    p = Path(path)
    try:
        raw = json.loads(p.read_text(encoding="utf-8"), parse_constant=reject_constant)
    except FileNotFoundError:
        logger.debug("State file %s not found, starting empty", p)
        return PersistedState()
    except (OSError, ValueError) as exc:
        logger.warning("Ignoring unreadable state file %s: %s", p, exc)
        return PersistedState()
    if not isinstance(raw, dict):
        logger.warning("Ignoring state file %s: top level is %s", p, type(raw).__name__)
        return PersistedState()
    return PersistedState.from_mapping(raw)


def utc_timestamp(now: Optional[datetime] = None) -> str:
    """ISO-8601 в UTC с миллисекундами и суффиксом Z, например 2026-10-19T08:15:00.123Z."""
    moment = (now or datetime.now(timezone.utc)).astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def merge_run(
    state: PersistedState,
    sources: Iterable[str],
    records: Optional[Iterable[FetchRecord]] = None,
    now: Optional[datetime] = None,
) -> PersistedState:
    """Проставляет время запуска и источники; debug заменяется, только если переданы records."""
    state.last_updated = utc_timestamp(now)
    state.sources = list(sources)
    if records is not None:
        debug: List[dict] = [r.to_dict() for r in records]
        state.debug = debug
    # matches пока не заполняется, но всегда остаётся массивом
    if not isinstance(state.matches, list):
        state.matches = []
    return state
