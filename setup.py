"""Legacy setuptools entry point for decorum.

Project metadata, dependencies and the console script live in pyproject.toml.
"""
from setuptools import setup

setup()
