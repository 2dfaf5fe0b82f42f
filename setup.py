"""
Minimal setup.py for carthage tasks

Runtime Requirements:
- macOS with Xcode (xcodebuild) for actual Carthage runs
- Carthage on the PATH or in /usr/local/bin

Configuration:
- Optional carthage.yaml in the project directory
- Command line options override file values
"""

from pathlib import Path
from setuptools import setup, find_packages

# Read README for long description
readme_path = Path("README.md")
long_description = ""
if readme_path.exists():
    with open(readme_path, "r", encoding="utf-8") as f:
        long_description = f.read()

setup(
    name="carthage-tasks",
    version="1.0.0",
    author="Netham45",
    description="Runs the Carthage dependency manager for Xcode projects",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["carthage_tasks", "carthage_tasks.*"]),
    entry_points={
        "console_scripts": [
            "carthage-tasks=carthage_tasks.main:main",
        ],
    },
    zip_safe=False,
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2",
        "PyYAML",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
        "dev": [
            "pytest",
            "pytest-cov",
            "black",
            "flake8",
            "mypy",
        ]
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
        "Operating System :: MacOS :: MacOS X",
        "Topic :: Software Development :: Build Tools",
    ],
)
