"""
Sheet Sync Package

Periodically mirrors a source HTTP API into a Google Sheets range.

Modules:
- extract: Row fetching from the source API
- transform: Fixed-order row mapping
- validator: Response shape checks
- load: Clear-then-write into Google Sheets
- run_etl: Pipeline orchestration
"""

__version__ = "1.0.0"
__author__ = "Data Engineering Team"
