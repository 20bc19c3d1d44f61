"""Typer command modules for the citeprobe CLI."""
