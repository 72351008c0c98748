#!/usr/bin/env python3

from setuptools import setup, find_packages
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "src"))

try:
    from loginradius import __version__
except ImportError:
    __version__ = "0.1.0"


def read_readme():
    try:
        with open("README.md", "r", encoding="utf-8") as fh:
            return fh.read()
    except FileNotFoundError:
        return "LoginRadius Python SDK - connection layer and profile models"


def read_requirements():
    try:
        with open("requirements.txt", "r", encoding="utf-8") as fh:
            return [
                line.strip() for line in fh if line.strip() and not line.startswith("#")
            ]
    except FileNotFoundError:
        return ["requests>=2.31.0", "urllib3>=2.0.0", "pyyaml>=6.0.1"]


setup(
    name="loginradius-sdk",
    version=__version__,
    author="LoginRadius SDK Team",
    author_email="sdk@example.com",
    description="Python client for the LoginRadius identity API",
    long_description=read_readme(),
    long_description_content_type="text/markdown",
    url="https://github.com/loginradius/loginradius-python-sdk",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    package_data={"loginradius": ["resources/*.yml"]},
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: Apache Software License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Topic :: Internet :: WWW/HTTP",
    ],
    python_requires=">=3.9",
    install_requires=read_requirements(),
    extras_require={
        "dev": [
            "pytest>=7.4.0",
            "pytest-cov>=4.1.0",
            "black>=23.0.0",
            "flake8>=6.0.0",
            "mypy>=1.5.0",
            "isort>=5.12.0",
        ],
        "test": [
            "pytest>=7.4.0",
            "pytest-cov>=4.1.0",
        ],
    },
    include_package_data=True,
    zip_safe=False,
)
