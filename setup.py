"""
Setup configuration for slidemend package.
"""

from setuptools import setup, find_packages

setup(
    name="slidemend",
    version="0.1.0",
    description="Markup repair and build fallbacks for generated slide decks",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.9",
    install_requires=[
        "click>=8.0",
        "pydantic>=2.0",
        "python-dotenv>=1.0",
        "PyYAML>=6.0",
        "logfire>=2.0",
        "tenacity>=8.2",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "slidemend=slidemend.cli.main:cli",
        ],
    },
)
