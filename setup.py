#!/usr/bin/env python
"""
Setup configuration for detfuse package

Installation:
    pip install -e .

Installation with development dependencies:
    pip install -e ".[dev]"
"""

from setuptools import setup, find_packages
from pathlib import Path

# Read README for long description
readme_file = Path(__file__).parent / "README.md"
long_description = readme_file.read_text(encoding="utf-8") if readme_file.exists() else ""

setup(
    name="detfuse",
    version="0.1.0",
    description="Detection post-processing: IoU, per-frame dedup, two-frame union and RGB/BGR swap",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="detfuse Team",
    author_email="",
    license="MIT",
    python_requires=">=3.8",

    packages=find_packages(include=["detfuse*"]),

    # Core dependencies
    install_requires=[
        # Buffers and vectorized IoU
        "numpy>=1.21.0",

        # Configuration files
        "pyyaml>=5.4.0",
    ],

    # Optional dependencies for development and extended functionality
    extras_require={
        "dev": [
            "pytest>=6.2.0",
            "pytest-cov>=2.12.0",
            # Reference channel swap in tests
            "opencv-python>=4.5.0",
            "black>=21.0",
            "isort>=5.9.0",
            "flake8>=3.9.0",
            "mypy>=0.910",
        ],
    },

    # Entry points for CLI tools
    entry_points={
        "console_scripts": [
            "detfuse-selftest=detfuse.cli:selftest_main",
        ],
    },

    # Metadata
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Science/Research",
        "Topic :: Scientific/Engineering :: Image Recognition",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],

    keywords="object-detection iou nms bounding-box post-processing",
)
