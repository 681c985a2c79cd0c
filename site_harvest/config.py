# === FILE: site_harvest/config.py ===
"""
Модуль для загрузки и валидации конфигурации краулера SiteHarvest.
Используется Pydantic для описания схемы и проверки данных.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, List, Union
from urllib.parse import urlsplit

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

DEFAULT_MAX_DEPTH = 5


class CrawlerConfig(BaseModel):
    """Конфигурация для одного запуска обхода."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    start_urls: List[str] = Field(..., min_length=1, description="Стартовые адреса (глубина 0).")
    max_depth: int = Field(DEFAULT_MAX_DEPTH, ge=0, description="Максимальная глубина обхода ссылок.")
    output_dir: Path = Field(Path("crawled_pages"), description="Каталог для текстовых бакетов.")
    concurrency: int = Field(8, ge=1, description="Число одновременно работающих воркеров.")
    timeout: float = Field(10.0, gt=0, description="Таймаут на один запрос (секунд).")
    user_agent: str = Field("SiteHarvestBot/1.0", min_length=1, description="Заголовок User-Agent.")

    @field_validator("start_urls")
    def _check_absolute_urls(cls, v: List[str]) -> List[str]:
        for url in v:
            parts = urlsplit(url.strip())
            if parts.scheme not in ("http", "https") or not parts.netloc:
                raise ValueError(f"start URL must be an absolute http(s) URL: {url!r}")
        return [url.strip() for url in v]


_DEFAULT_CFG = Path("config.json")


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
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValueError(f"Неправильный JSON в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень JSON должен быть mapping, получено {type(data).__name__}")
    return data


def load_config(path: Union[str, Path, None]) -> CrawlerConfig:
    """
    Читает JSON или YAML и возвращает проверенный объект CrawlerConfig.
    При отсутствии файла конфига бросает FileNotFoundError.
    """
    if path is None:
        if not _DEFAULT_CFG.exists():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(_DEFAULT_CFG))
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

    return CrawlerConfig(**data)


def with_overrides(config: CrawlerConfig, **overrides: Any) -> CrawlerConfig:
    """Возвращает новую проверенную конфигурацию; значения None игнорируются."""
    changes = {k: v for k, v in overrides.items() if v is not None}
    if not changes:
        return config
    return CrawlerConfig(**{**config.model_dump(), **changes})


__all__ = [
    "DEFAULT_MAX_DEPTH",
    "CrawlerConfig",
    "ValidationError",
    "load_config",
    "with_overrides",
]
