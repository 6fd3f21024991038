"""
rnboot: bootstrap launcher for the React Native command line interface

A small, globally installed entry point that either hands every command to
the project-local React Native CLI or, outside a project, scaffolds a new one
with `rnboot init <ProjectName>`.
"""

__version__ = "0.1.0"
__author__ = "rnboot contributors"

__all__ = ["__version__"]
