"""Assemble selected files and a request into a single LLM-ready document."""

__version__ = "0.1.0"
