"""
Core Pipeline
=============

Core modules for asset resolution, rendering, serving and capture.

Modules:
- graph: Asset graph loading and name resolution
- fonts: Inline font subsets
- rendering: Shell templates, page capture and markup correction
- server: Ephemeral static file server
- pipeline: Orchestration of one prerender run
"""
