# File: tests/test_config.py
import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from site_harvest.config import DEFAULT_MAX_DEPTH, CrawlerConfig, load_config, with_overrides


def write_file(tmp_path: Path, content: str, suffix: str) -> Path:
    path = tmp_path / f"config{suffix}"
    path.write_text(content, encoding="utf-8")
    return path


@pytest.mark.parametrize(
    "content,suffix,expect_exc",
    [
        ("start_urls: [https://x.test/a]", ".yaml", None),
        (json.dumps({"start_urls": ["https://x.test/a"]}), ".json", None),
        ("{}", ".json", ValidationError),
        (json.dumps({"start_urls": []}), ".json", ValidationError),
        (json.dumps({"start_urls": ["/relative"]}), ".json", ValidationError),
        (json.dumps({"start_urls": ["ftp://x.test/"]}), ".json", ValidationError),
        (json.dumps({"start_urls": ["https://x.test/"], "max_depth": -1}), ".json", ValidationError),
        (json.dumps({"start_urls": ["https://x.test/"], "unknown": 1}), ".json", ValidationError),
        ("{not json", ".json", ValueError),
        ("not: a: mapping", ".yaml", ValueError),
        ("- just\n- a list", ".yml", TypeError),
        ("[1, 2]", ".json", TypeError),
        ("start_urls = []", ".toml", ValueError),
    ],
)
def test_load_config_variants(tmp_path, content, suffix, expect_exc):
    cfg_path = write_file(tmp_path, content, suffix)
    if expect_exc:
        with pytest.raises(expect_exc):
            load_config(cfg_path)
    else:
        cfg = load_config(cfg_path)
        assert isinstance(cfg, CrawlerConfig)
        assert cfg.start_urls == ["https://x.test/a"]


def test_defaults():
    cfg = CrawlerConfig(start_urls=["https://x.test/"])
    assert cfg.max_depth == DEFAULT_MAX_DEPTH == 5
    assert cfg.output_dir == Path("crawled_pages")
    assert cfg.concurrency >= 1


def test_config_is_frozen():
    cfg = CrawlerConfig(start_urls=["https://x.test/"])
    with pytest.raises(ValidationError):
        cfg.max_depth = 1


def test_load_config_default_missing(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(FileNotFoundError):
        load_config(None)


def test_load_config_default_present(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    Path("config.json").write_text(
        json.dumps({"start_urls": ["https://x.test/a", "https://x.test/a"], "max_depth": 1}),
        encoding="utf-8",
    )
    cfg = load_config(None)
    assert cfg.start_urls == ["https://x.test/a", "https://x.test/a"]
    assert cfg.max_depth == 1


def test_load_config_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.json")


def test_with_overrides():
    cfg = CrawlerConfig(start_urls=["https://x.test/"], max_depth=3)
    assert with_overrides(cfg, max_depth=None) is cfg
    changed = with_overrides(cfg, max_depth=0, concurrency=2)
    assert (changed.max_depth, changed.concurrency) == (0, 2)
    assert cfg.max_depth == 3
    with pytest.raises(ValidationError):
        with_overrides(cfg, concurrency=0)
