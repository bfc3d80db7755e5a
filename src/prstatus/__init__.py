"""prstatus CLI entry point.

This package overlays review and CI status onto the open pull requests of a
GitHub repository. See `prstatus --help` for details.
"""
