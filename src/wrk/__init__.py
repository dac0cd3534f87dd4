"""wrk CLI entry point.

This package provides a Click-based CLI for opening projects, grouped into
workspace directories, in a configured editor. See `wrk --help` for details.
"""
