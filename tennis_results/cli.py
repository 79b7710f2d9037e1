# === FILE: tennis_results/cli.py ===
#!/usr/bin/env python3
"""
Точка входа tennis_results: один запуск пайплайна без обязательных аргументов.

Опции:
  --config PATH       YAML/JSON-конфиг (по умолчанию configs/default.yaml, если есть)
  --output PATH       Куда писать состояние (override output_path)
  --timestamp-only    Только обновить lastUpdated и sources, без запросов в сеть
  --log-level LEVEL   Уровень логирования (DEBUG, INFO, ...)
  --log-file PATH     Файл для логов (только stderr, если не указан)

Дополнительно:
  --version, -v       Показать версию

Пример:
  tennis-results --config configs/default.yaml --log-level DEBUG
"""
import sys
from pathlib import Path

import click

from tennis_results import __version__
from tennis_results.config import load_config
from tennis_results.logger import init_logging
from tennis_results.pipeline import run_pipeline

CONTEXT_SETTINGS = dict(help_option_names=["--help", "-h"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


@click.command(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='tennis_results, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Путь к файлу конфигурации (YAML или JSON).'
)
@click.option(
    '--output', '-o', 'output_path',
    default=None,
    type=click.Path(dir_okay=False, path_type=Path),
    help='Файл состояния (override output_path из конфига)'
)
@click.option(
    '--timestamp-only', 'timestamp_only',
    is_flag=True,
    help='Только обновить lastUpdated и sources, не загружая страницы'
)
@click.option(
    '--log-level', 'log_level',
    default='INFO', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Уровень логирования'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(dir_okay=False, path_type=Path),
    help='Путь к файлу логов'
)
def main(config_path, output_path, timestamp_only, log_level, log_file):
    """Загрузить страницы результатов и обновить data/results.json."""
    logger = init_logging(level=log_level, log_file=str(log_file) if log_file else None)
    try:
        cfg = load_config(config_path)
    except Exception as e:
        print_error(f'Ошибка загрузки конфигурации: {e}')
    logger.debug("Config: %s", cfg.model_dump_json())

    target = output_path or cfg.output_path
    try:
        state = run_pipeline(cfg, target, timestamp_only=timestamp_only)
    except (OSError, ValueError) as e:
        print_error(f'Ошибка записи {target}: {e}')

    if timestamp_only:
        click.echo(f'Updated {target} lastUpdated={state.last_updated}')
    else:
        click.echo(f'Wrote {target}')


if __name__ == "__main__":
    main()
