"""
Configuration Management
=======================

Environment-based configuration using Pydantic Settings.

Components:
- settings: Pipeline settings and environment configuration
- logging: Structured logging configuration
"""
