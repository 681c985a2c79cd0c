# File: site_harvest/storage/bucketer.py
"""site_harvest.storage.bucketer: Группировка содержимого страниц в текстовые файлы-бакеты.

Ключ бакета строится из адреса без схемы: все символы, кроме букв, цифр и точки,
заменяются на ``_``, строка режется на непустые сегменты. Сегменты хоста
сохраняются всегда; из сегментов пути (вместе с query) берутся не более
``MAX_SEGMENTS`` первых, поэтому более глубокие страницы с общим префиксом
сливаются в один файл.
"""

from __future__ import annotations

import re
import shutil
import threading
from collections import defaultdict
from pathlib import Path
from typing import DefaultDict, List, Optional, Union
from urllib.parse import urlsplit

from bs4 import BeautifulSoup

from site_harvest.logger import get_logger
from site_harvest.parser.html_parser import inner_markup, main_content

MAX_SEGMENTS = 3
SEPARATOR = "=" * 40

_UNSAFE_RE = re.compile(r"[^\w.]")

log = get_logger("bucketer")


def _segments(text: str) -> List[str]:
    return [s for s in _UNSAFE_RE.sub("_", text).split("_") if s]


def bucket_key(url: str, max_segments: int = MAX_SEGMENTS) -> str:
    """Детерминированно вычисляет ключ бакета для адреса.

    >>> bucket_key("https://a.example/p/q/r/s")
    'a.example_p_q_r'
    >>> bucket_key("https://a.example/p/q")
    'a.example_p_q'
    """
    parts = urlsplit(url)
    rest = parts.path + (f"?{parts.query}" if parts.query else "")
    return "_".join(_segments(parts.netloc) + _segments(rest)[:max_segments])


def entry_header(url: str) -> str:
    return f"\n\n{SEPARATOR}\nURL: {url}\n{SEPARATOR}\n"


def prepare_output_dir(path: Union[str, Path]) -> Path:
    """Удаляет каталог вывода, если он есть, и создаёт его заново пустым."""
    out = Path(path)
    if out.exists():
        shutil.rmtree(out)
    out.mkdir(parents=True)
    return out


class ContentBucketer:
    """Дописывает содержимое страниц в ``<output_dir>/<key>.txt``.

    Записи в один бакет сериализуются отдельной блокировкой на ключ.
    """

    def __init__(self, output_dir: Union[str, Path], max_segments: int = MAX_SEGMENTS) -> None:
        self.output_dir = Path(output_dir)
        self.max_segments = max_segments
        self._locks: DefaultDict[str, threading.Lock] = defaultdict(threading.Lock)
        self._locks_guard = threading.Lock()

    def path_for(self, key: str) -> Path:
        return self.output_dir / f"{key}.txt"

    def _lock_for(self, key: str) -> threading.Lock:
        with self._locks_guard:
            return self._locks[key]

    def record(self, url: str, content: str) -> str:
        """Дописывает заголовок с адресом и содержимое в бакет; возвращает ключ."""
        key = bucket_key(url, self.max_segments)
        path = self.path_for(key)
        with self._lock_for(key):
            with path.open("a", encoding="utf-8") as fh:
                fh.write(entry_header(url))
                fh.write(content)
        log.debug("Appended %s to bucket %s", url, key)
        return key

    def record_document(self, url: str, document: BeautifulSoup) -> Optional[str]:
        """Записывает регион ``<main>`` документа; без него страница молча пропускается."""
        region = main_content(document)
        if region is None:
            log.debug("No main content in %s", url)
            return None
        return self.record(url, inner_markup(region))


__all__ = [
    "MAX_SEGMENTS",
    "SEPARATOR",
    "bucket_key",
    "entry_header",
    "prepare_output_dir",
    "ContentBucketer",
]
