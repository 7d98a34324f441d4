# config_local.example.py

"""
Example local overrides.

Usage:
  1) Copy this file to `config_local.py`
  2) Adjust values for your machine
  3) Never commit `config_local.py` (it is gitignored)

Prefer `.env` for anything else. This file should contain only safe overrides.
"""

# Example: point at a local auth backend
# API_BASE_URL = "http://localhost:5000"

# Example: no live clock (e.g. when piping input)
# CLOCK_ENABLED = False
