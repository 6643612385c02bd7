# setup.py
from setuptools import setup, find_packages

setup(
    name="wiki_watch",
    version="0.1.0",
    description="Watch a wiki table and report newly added rows",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "aiohttp>=3.9",
        "click>=8.1",
        "Jinja2>=3.1",
        "mwparserfromhell>=0.6",
        "pydantic>=2.6",
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
            "pytest-asyncio>=0.23",
        ],
    },
    entry_points={
        "console_scripts": ["wiki_watch=wiki_watch.cli:cli"],
    },
    python_requires=">=3.11",
)
