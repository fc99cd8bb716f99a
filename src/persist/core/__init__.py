"""Core domain models, constants and exceptions."""
