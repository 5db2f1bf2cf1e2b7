"""Rendering of registered prompts."""
