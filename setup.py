"""
Doctorus Utils - shared Python utilities for Doctorus services

Doctorus Utils bundles the small, dependency-light building blocks that every
Doctorus service needs: the resource/action operation taxonomy used for
permissions and audit labeling, bilingual status metadata with workflow
transition rules, parameter-store path helpers, and audit change tracking.
"""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

with open("requirements.txt", "r", encoding="utf-8") as fh:
    requirements = [line.strip() for line in fh if line.strip() and not line.startswith("#")]

setup(
    name="doctorus-utils",
    version="0.1.0",
    author="Doctorus",
    description="Common Python utilities for Doctorus",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/DoctorusRepoOwner/doctorus-common",
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
    python_requires=">=3.8",
    install_requires=requirements,
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "black>=23.0.0",
            "flake8>=6.0.0",
            "mypy>=1.0.0",
            "pre-commit>=3.0.0",
        ],
    },
)
