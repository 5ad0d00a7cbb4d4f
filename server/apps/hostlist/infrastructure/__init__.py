"""Infrastructure layer for hostlist app.

This package contains integrations with external systems:
- Host directory scanning and extension filtering

Keep infrastructure concerns separate from business logic.
"""
