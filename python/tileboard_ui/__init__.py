"""Presentation layers for the puzzle engine."""
