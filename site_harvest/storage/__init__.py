# File: site_harvest/storage/__init__.py
"""site_harvest.storage: запись содержимого страниц в файлы-бакеты."""

from .bucketer import ContentBucketer, bucket_key, prepare_output_dir

__all__ = ["ContentBucketer", "bucket_key", "prepare_output_dir"]
