#!/usr/bin/env python3
"""
Setup script for the KnowZone backend

Install with:
    pip install -e .

With test dependencies:
    pip install -e ".[dev]"
"""

from setuptools import setup, find_packages
from pathlib import Path

# Read README
readme_path = Path(__file__).parent / "README.md"
long_description = ""
if readme_path.exists():
    long_description = readme_path.read_text(encoding="utf-8")

# API server dependencies
requirements = [
    "fastapi>=0.110.0",
    "uvicorn[standard]>=0.27.0",
    "pydantic>=2.5.0",
    "pydantic-settings>=2.1.0",
    "email-validator>=2.1.0",
    "python-jose[cryptography]>=3.3.0",
    "google-auth>=2.27.0",
    "requests>=2.31.0",
    "anthropic>=0.18.0",
]

setup(
    name="knowzone",
    version="1.0.0",
    description="KnowZone - college community backend with AI chat",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="KnowZone Team",
    license="MIT",
    package_dir={"": "backend"},
    packages=find_packages("backend", exclude=["tests", "tests.*", "mocks", "mocks.*"]),
    python_requires=">=3.9",
    install_requires=requirements,
    extras_require={
        "dev": [
            "pytest>=7.4.0",
            "pytest-asyncio>=0.23.0",
            "faker>=22.0.0",
            "httpx>=0.26.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "knowzone=knowzone.main:run",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Framework :: FastAPI",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    keywords="fastapi college community forums mentoring anthropic",
)
