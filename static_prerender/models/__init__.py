"""
Data Models
===========

Pydantic models for the asset graph, fonts, rendering context and results.
"""
