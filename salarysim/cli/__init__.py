"""Salary Sim command-line interface."""
