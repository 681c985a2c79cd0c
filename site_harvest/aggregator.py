# File: site_harvest/aggregator.py
"""site_harvest.aggregator: Сводка результатов одного запуска обхода."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from typing import Dict, List, Optional, TypedDict

from site_harvest.crawler.models import CrawlTask, TaskState


class PageInfo(TypedDict, total=False):
    """Информация об обработанной (запрошенной) странице."""

    url: str
    depth: int
    state: str
    status: Optional[int]
    bucket: Optional[str]
    links: int
    error: str


@dataclass(slots=True)
class CrawlReport:
    """Результаты обхода: запрошенные страницы, счётчики пропусков и длительность."""

    seeds: List[str] = field(default_factory=list)
    max_depth: int = 0
    pages: List[PageInfo] = field(default_factory=list)
    skipped: Dict[str, int] = field(default_factory=lambda: {"depth": 0, "visited": 0})
    duration: float = 0.0

    def add_page(
        self,
        task: CrawlTask,
        state: TaskState,
        *,
        status: Optional[int] = None,
        bucket: Optional[str] = None,
        links: int = 0,
        error: str = "",
    ) -> None:
        """Добавляет запись о задаче, дошедшей до запроса страницы."""
        info: PageInfo = {
            "url": task.url,
            "depth": task.depth,
            "state": state.value,
            "status": status,
            "bucket": bucket,
            "links": links,
        }
        if error:
            info["error"] = error
        self.pages.append(info)

    def add_skip(self, reason: str) -> None:
        self.skipped[reason] = self.skipped.get(reason, 0) + 1

    @property
    def fetched_urls(self) -> List[str]:
        return [p["url"] for p in self.pages]

    @property
    def failed_urls(self) -> List[str]:
        return [p["url"] for p in self.pages if p["state"] == TaskState.FAILED.value]

    @property
    def buckets(self) -> List[str]:
        return sorted({p["bucket"] for p in self.pages if p.get("bucket")})

    def summary(self) -> Dict[str, object]:
        """Короткая сводка для CLI и отчётов."""
        return {
            "pages": len(self.pages),
            "failed": len(self.failed_urls),
            "buckets": len(self.buckets),
            "skipped": dict(self.skipped),
            "duration": round(self.duration, 3),
        }

    def json(self, *, pretty: bool = False) -> str:
        """Возвращает JSON-представление CrawlReport."""
        output = asdict(self)
        output["summary"] = self.summary()
        return json.dumps(output, ensure_ascii=False, indent=2 if pretty else None)


__all__ = ["PageInfo", "CrawlReport"]
