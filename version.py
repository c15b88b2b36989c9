"""
version.py — passwordcheck
===========================
Single source of truth for the version number.
Used by:
  - pyproject.toml (dynamic version)
  - LoggingConfig startup message
"""

APP_NAME = "passwordcheck"
VERSION  = "1.0.0"
BUILD    = "2026.10.19"
