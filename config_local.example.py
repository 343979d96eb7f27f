# config_local.example.py

"""
Example local overrides.

Usage:
  1) Copy this file to `config_local.py`
  2) Adjust values for your machine
  3) Never commit `config_local.py` (it is gitignored)

Prefer `.env` for everything else. This file should contain only safe overrides.
"""

# Example: plain replies without timestamps (handy when piping a script into yarr)
# CONSOLE_TIMESTAMPS = False
