#!/usr/bin/env python
"""Setup configuration for the multi-calendar conversion service."""

from setuptools import find_packages, setup

setup(
    name="multicalendar",
    version="1.0.0",
    description="Gregorian to multi-calendar date conversion engine and HTTP API",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.11",
    install_requires=[
        "fastapi>=0.104.1",
        "uvicorn[standard]>=0.24.0",
        "pydantic>=2.5.0",
        "pydantic-settings>=2.0.0",
        "structlog>=23.2.0",
        "python-dateutil>=2.8.2",
        "hijri-converter>=2.3.1",
        "jdatetime>=4.1.1",
        "pyluach>=2.2.0",
        "zhdate>=0.1",
    ],
    extras_require={
        "test": [
            "pytest>=7.4.0",
            "httpx>=0.25.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "multicalendar-api=multicalendar.main:main",
        ],
    },
)
