# === FILE: tennis_results/config.py ===
"""
Загрузка и валидация конфигурации tennis_results.

Схема описана через Pydantic. Файл конфигурации необязателен: без него
используются значения по умолчанию (страница результатов DLTC и «вежливые»
заголовки запроса).
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Dict, List, Union

import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    HttpUrl,
    TypeAdapter,
    ValidationError,
    field_validator,
)

DEFAULT_SOURCES: List[str] = [
    "https://www.dltcdirectory.net/result/6908e46ec0192a8ab45480f5/693ffbaa4b2dded509dcc64e",
]
DEFAULT_USER_AGENT = "Mozilla/5.0 (compatible; TennisResultsBot/1.0; +https://github.com/)"
DEFAULT_ACCEPT = "text/html,application/xhtml+xml"
# корень программы: каталог, в котором лежат tennis_results/, configs/ и data/
PROJECT_ROOT = Path(__file__).resolve().parent.parent
DEFAULT_OUTPUT = PROJECT_ROOT / "data" / "results.json"

_URL_ADAPTER = TypeAdapter(HttpUrl)


class ResultsConfig(BaseModel):
    """Настройки одного запуска: источники, путь к файлу и заголовки запроса."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    sources: List[str] = Field(
        default_factory=lambda: list(DEFAULT_SOURCES),
        description="URL страниц с результатами, в порядке обхода.",
    )
    output_path: Path = Field(DEFAULT_OUTPUT, description="Файл с сохранённым состоянием.")
    user_agent: str = Field(DEFAULT_USER_AGENT, min_length=1, description="Заголовок User-Agent.")
    accept: str = Field(DEFAULT_ACCEPT, min_length=1, description="Заголовок Accept.")
    max_keys: int = Field(80, ge=1, description="Сколько ключей верхнего уровня оставлять в сводке.")

    @field_validator("sources")
    def _check_urls(cls, v: List[str]) -> List[str]:
        # HttpUrl только проверяет; исходная строка сохраняется как есть
        for url in v:
            try:
                _URL_ADAPTER.validate_python(url)
            except ValidationError as exc:
                raise ValueError(f"Некорректный URL источника: {url!r}") from exc
        return v

    @field_validator("output_path")
    def _anchor_output(cls, v: Path) -> Path:
        # относительный путь считается от корня программы, а не от cwd
        v = v.expanduser()
        return v if v.is_absolute() else PROJECT_ROOT / v

    @property
    def headers(self) -> Dict[str, str]:
        return {"user-agent": self.user_agent, "accept": self.accept}


_DEFAULT_CFG = PROJECT_ROOT / "configs" / "default.yaml"


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Неправильный YAML в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень YAML должен быть mapping, получено {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Неправильный JSON в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень JSON должен быть mapping, получено {type(data).__name__}")
    return data


def load_config(path: Union[str, Path, None]) -> ResultsConfig:
    """
    Читает YAML или JSON и возвращает проверенный ResultsConfig.

    Без пути берётся configs/default.yaml в корне программы, а если его нет,
    встроенные значения по умолчанию. Явно указанный, но отсутствующий
    файл даёт FileNotFoundError.
    """
    if path is None:
        if not _DEFAULT_CFG.is_file():
            return ResultsConfig()
        path_obj = _DEFAULT_CFG
    else:
        path_obj = Path(path).expanduser().resolve()
        if not path_obj.is_file():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        data = _read_yaml(path_obj)
    elif suffix == ".json":
        data = _read_json(path_obj)
    else:
        raise ValueError(f"Неподдерживаемый формат конфига: {suffix}")

    return ResultsConfig(**data)


__all__ = ["ResultsConfig", "load_config", "ValidationError"]
