"""
Static Prerender
================

Post-build prerendering for bundled single-page applications.

This package provides:
- Asset graph loading and logical-to-hashed name resolution
- HTML shell rendering with inlined font subsets
- An ephemeral local server for the built output
- Headless browser capture with Playwright
- Markup correction into a portable static document
"""

__version__ = "1.0.0"
