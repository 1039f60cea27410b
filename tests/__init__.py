"""
Test Suite
==========

Test suite matching the static_prerender/ package structure.

Test Categories:
- unit: Unit tests for individual components
- integration: Real server and pipeline runs with a stubbed browser
- e2e: Headless Chromium captures
"""
