"""Compiled-in prompt template texts."""
