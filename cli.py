# cli.py

"""
Запуск tennis_results из корня репозитория без установки пакета.

Пример запуска (так его вызывает плановая задача):
    python cli.py
    python cli.py --timestamp-only
"""
from tennis_results.cli import main


if __name__ == '__main__':
    main()
