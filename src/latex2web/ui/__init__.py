"""User interfaces for latex2web."""
