"""Salary Sim - net salary simulation tools."""

__version__ = "0.1.0"
