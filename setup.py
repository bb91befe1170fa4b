# setup.py
from setuptools import setup, find_packages

setup(
    name="word_scout",
    version="0.1.0",
    description="Bounded breadth-first web crawler that searches for a word",
    packages=find_packages(include=["word_scout", "word_scout.*"]),
    install_requires=[
        "aiohttp>=3.9",
        "beautifulsoup4>=4.12",
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
        "console_scripts": ["word-scout=word_scout.cli:cli"],
    },
    python_requires=">=3.11",
)
