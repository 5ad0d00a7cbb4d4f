"""Business logic layer for hostlist app.

This package builds the per-request hostlist:
- Collecting and shuffling matching host files
- Narrowing by the requested protocol bitmap
- Streaming file contents in order
"""
