# setup.py
from setuptools import setup, find_packages

setup(
    name="tennis_results",
    version="0.1.0",
    description="Сбор отладочной сводки со страниц результатов теннисных матчей",
    packages=find_packages(exclude=["tests", "tests.*"]),  # найдёт папку tennis_results
    install_requires=[
        "aiohttp>=3.9",
        "click>=8.1",
        "pydantic>=2.5",
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
            "pytest-asyncio>=0.23",
        ],
    },
    entry_points={
        "console_scripts": [
            "tennis-results=tennis_results.cli:main",
        ],
    },
    python_requires=">=3.11",
)
