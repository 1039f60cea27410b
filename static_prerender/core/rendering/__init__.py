"""
Rendering Module
===============

Template rendering and prerender capture with browser automation.

Components:
- template_renderer: Jinja2 file templates
- shell_renderer: HTML shell context and rendering
- prerenderer: Playwright page capture
- markup_corrector: Static markup rewrites
- templates: Default shell and headers templates
"""
