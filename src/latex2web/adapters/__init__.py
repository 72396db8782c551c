"""Adapters binding the core pipeline to HTML output and external tools."""
