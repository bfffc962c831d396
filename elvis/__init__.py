"""Declarative widget trees with CSS values and styles, rendered to HTML and CSS."""

__version__ = "0.1.0"