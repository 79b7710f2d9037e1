# File: tennis_results/pipeline.py
"""tennis_results.pipeline: загрузка состояния, обход источников, сводка и запись."""

from __future__ import annotations

import asyncio
from datetime import datetime
from pathlib import Path
from typing import Iterable, List, Optional, Union

from tennis_results.config import ResultsConfig
from tennis_results.fetcher import fetch_all
from tennis_results.logger import logger
from tennis_results.models import FetchRecord, FetchResult, JSONValue, PersistedState
from tennis_results.parser.next_data import extract_next_data, html_hints
from tennis_results.report.json_report import render_json
from tennis_results.state import load_state, merge_run
from tennis_results.summarizer import summarize

__all__ = ["has_payload", "build_record", "collect_records", "run_pipeline_async", "run_pipeline"]


def has_payload(value: JSONValue) -> bool:
    """Пустые скаляры (null, false, 0, "") считаются отсутствием данных; {} и [] нет."""
    if isinstance(value, (dict, list)):
        return True
    return bool(value)


def build_record(result: FetchResult, max_keys: int = 80) -> FetchRecord:
    """Превращает сырой ответ в отладочную запись со сводкой __NEXT_DATA__."""
    if not result.ok:
        return FetchRecord.failed(result.url, result.error or "")
    html = result.body or ""
    next_data = extract_next_data(html)
    has_next_data = has_payload(next_data)
    return FetchRecord(
        url=result.url,
        http_status=result.status,
        has_next_data=has_next_data,
        next_data_top_level=summarize(next_data, max_keys) if has_next_data else None,
        html_hints=html_hints(html),
    )


async def collect_records(config: ResultsConfig, sources: Optional[Iterable[str]] = None) -> List[FetchRecord]:
    """Последовательно загружает источники и возвращает по записи на каждый URL."""
    urls = list(config.sources if sources is None else sources)
    results = await fetch_all(urls, config)
    return [build_record(r, config.max_keys) for r in results]


async def run_pipeline_async(
    config: ResultsConfig,
    output_path: Union[str, Path, None] = None,
    *,
    timestamp_only: bool = False,
    now: Optional[datetime] = None,
) -> PersistedState:
    """Один запуск: load → fetch → summarize → write.

    При ``timestamp_only`` сеть не используется: обновляются только
    lastUpdated и sources, debug остаётся прежним. Ошибки записи файла
    пробрасываются вызывающему.
    """
    target = Path(output_path) if output_path is not None else config.output_path
    state = load_state(target)

    records: Optional[List[FetchRecord]] = None
    if not timestamp_only:
        logger.info("Fetching %d source(s)…", len(config.sources))
        records = await collect_records(config)
        failed = sum(1 for r in records if r.error is not None)
        if failed:
            logger.warning("%d of %d source(s) failed", failed, len(records))

    merge_run(state, config.sources, records, now=now)
    render_json(state, target)
    logger.info("State written to %s (lastUpdated=%s)", target, state.last_updated)
    return state


def run_pipeline(
    config: ResultsConfig,
    output_path: Union[str, Path, None] = None,
    *,
    timestamp_only: bool = False,
    now: Optional[datetime] = None,
) -> PersistedState:
    """Синхронная обёртка над :func:`run_pipeline_async` для CLI."""
    return asyncio.run(
        run_pipeline_async(config, output_path, timestamp_only=timestamp_only, now=now)
    )
