"""Nihara assistant gateway for the Gemini API."""

__version__ = "0.1.0"
