"""Lexical symptom-to-disease matching service."""

__version__ = "0.1.0"
