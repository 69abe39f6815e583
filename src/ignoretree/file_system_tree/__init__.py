"""Filesystem traversal and ignore-aware tree rendering.

This package provides the deterministic walk shared by index building and
rendering, and the renderer that prints the surviving entries.
"""
