#!/usr/bin/env python3
"""
Setup script for nexus-staging package.
"""

from setuptools import setup, find_packages
import os


# Read the README file for long description
def read_readme():
    """Read the README file."""
    readme_path = os.path.join(os.path.dirname(__file__), "README.md")
    if os.path.exists(readme_path):
        with open(readme_path, "r", encoding="utf-8") as f:
            return f.read()
    return "Nexus Staging - open staging repositories on a Nexus repository manager"


setup(
    name="nexus-staging",
    version="0.1.0",
    author="Nexus Staging Developers",
    description="A Python client that opens Nexus staging repositories and resolves their upload URLs",
    long_description=read_readme(),
    long_description_content_type="text/markdown",
    packages=find_packages(include=["nexus_staging", "nexus_staging.*"]),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: Apache Software License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Software Development :: Build Tools",
        "Topic :: System :: Software Distribution",
    ],
    python_requires=">=3.11",
    install_requires=[
        "httpx>=0.24.0",
        "pydantic>=2.5.0",
        "click>=8.0.0",
    ],
    extras_require={
        "dev": [
            "pytest>=6.0",
            "pytest-cov>=2.0",
            "respx>=0.20.0",
            "black>=21.0",
            "flake8>=3.8",
            "mypy>=0.800",
            "pylint>=2.8",
        ],
        "test": [
            "pytest>=6.0",
            "respx>=0.20.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "nexus-staging=nexus_staging.cli:main",
        ],
    },
    include_package_data=True,
    zip_safe=False,
)
