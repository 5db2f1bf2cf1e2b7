"""Read-only HTTP export of the prompt catalog."""
