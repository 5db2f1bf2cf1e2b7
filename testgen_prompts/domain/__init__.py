"""Prompt catalog domain: generator keys and the template registry."""
