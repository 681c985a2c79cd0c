# === FILE: site_harvest/cli.py ===
#!/usr/bin/env python3
"""
Точка входа для запуска краулера SiteHarvest через командную строку.

Команды:
  crawl     Выполнить обход по конфигу и сохранить бакеты/отчёты
  config    Показать текущую конфигурацию

Общие опции:
  --config PATH       Путь к JSON/YAML-конфигу (default: config.json)
  --log-level LEVEL   Уровень логирования (DEBUG, INFO, ...)
  --log-file PATH     Файл для логов (default: site_harvest.log)
  --log-format FORMAT Формат логирования

Команда crawl опции:
  --max-depth INT      Переопределить max_depth
  --concurrency INT    Переопределить число воркеров
  --output-dir DIR     Переопределить каталог бакетов
  --json PATH          Сохранить JSON-отчёт в файл
  --html PATH          Сохранить HTML-отчёт в файл
  --template DIR       Папка с Jinja2-шаблоном report.html.j2
  --crawl-timeout SEC  Таймаут всего обхода (секунд)

Пример:
  site-harvest --config config.json crawl --max-depth 2 --json report.json
"""
import asyncio
import sys
from pathlib import Path

import click

from site_harvest import __version__
from site_harvest.config import load_config, with_overrides
from site_harvest.engine import start_crawl
from site_harvest.logger import DEFAULT_FORMAT, DEFAULT_LOG_FILE, init_logging
from site_harvest.report import render_html, render_json

CONTEXT_SETTINGS = dict(help_option_names=["--help"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='SiteHarvest, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default='config.json',
    show_default=True,
    type=click.Path(dir_okay=False, path_type=Path),
    help='Путь к файлу конфигурации JSON/YAML.'
)
@click.option(
    '--log-level', 'log_level',
    default='INFO', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Уровень логирования'
)
@click.option(
    '--log-file', 'log_file',
    default=DEFAULT_LOG_FILE,
    show_default=True,
    type=click.Path(dir_okay=False, path_type=Path),
    help='Путь к файлу логов (пустая строка - только stdout)'
)
@click.option(
    '--log-format', 'log_format',
    default=DEFAULT_FORMAT,
    show_default=True,
    help='Строка формата для логов'
)
@click.pass_context
def cli(ctx, config_path, log_level, log_file, log_format):
    """Группа команд SiteHarvest CLI."""
    init_logging(
        level=log_level,
        log_file=str(log_file) if log_file and str(log_file) != '.' else None,
        log_format=log_format,
    )
    try:
        cfg = load_config(config_path)
    except Exception as e:
        print_error(f'Ошибка загрузки конфигурации: {e}')
    ctx.ensure_object(dict)
    ctx.obj['config'] = cfg


@cli.command('crawl', context_settings=CONTEXT_SETTINGS)
@click.option('--max-depth', 'max_depth', type=click.IntRange(min=0), default=None,
              help='Максимальная глубина обхода (override max_depth)')
@click.option('--concurrency', 'concurrency', type=click.IntRange(min=1), default=None,
              help='Число воркеров (override concurrency)')
@click.option('--output-dir', 'output_dir', type=click.Path(file_okay=False, path_type=Path),
              default=None, help='Каталог для бакетов (override output_dir)')
@click.option(
    '--json', '-j', 'json_output',
    default=None,
    type=click.Path(dir_okay=False, path_type=Path),
    help='Сохранить JSON-отчёт в файл'
)
@click.option(
    '--html', '-h', 'html_output',
    default=None,
    type=click.Path(dir_okay=False, path_type=Path),
    help='Сохранить HTML-отчёт в файл'
)
@click.option(
    '--template', '-t', 'template_dir',
    default=None,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help='Папка с Jinja2-шаблоном (по умолчанию встроенный)'
)
@click.option(
    '--crawl-timeout', 'crawl_timeout',
    type=float,
    default=None,
    help='Таймаут всего обхода (секунд)'
)
@click.pass_context
def crawl(ctx, max_depth, concurrency, output_dir, json_output, html_output, template_dir, crawl_timeout):
    """Выполнить обход и сохранить бакеты и отчёты."""
    try:
        cfg = with_overrides(
            ctx.obj['config'],
            max_depth=max_depth,
            concurrency=concurrency,
            output_dir=output_dir,
        )
    except Exception as e:
        print_error(f'Ошибка в параметрах: {e}')

    click.echo(f'Starting crawl: {", ".join(cfg.start_urls)} (max_depth={cfg.max_depth})')
    try:
        if crawl_timeout:
            report = asyncio.run(
                asyncio.wait_for(start_crawl(cfg), timeout=crawl_timeout)
            )
        else:
            report = asyncio.run(start_crawl(cfg))
    except asyncio.TimeoutError:
        print_error(f'Обход не завершён за {crawl_timeout} секунд')
    except Exception as e:
        print_error(f'Ошибка при обходе: {e}')

    summary = report.summary()
    click.echo(
        f"Crawled {summary['pages']} page(s), {summary['failed']} failed, "
        f"{summary['buckets']} bucket(s) in {cfg.output_dir}"
    )

    if json_output:
        try:
            saved_json = render_json(report, json_output)
            click.echo(f'JSON report: {saved_json}')
        except Exception as e:
            print_error(f'Ошибка при сохранении JSON: {e}')

    if html_output:
        try:
            saved_html = render_html(report, html_output, template_dir)
            click.echo(f'HTML report: {saved_html}')
        except Exception as e:
            print_error(f'Ошибка при сохранении HTML: {e}')


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.pass_context
def show_config(ctx):
    """Показать текущую конфигурацию в JSON."""
    cfg = ctx.obj['config']
    click.echo(cfg.model_dump_json(indent=2))


if __name__ == "__main__":
    cli()
