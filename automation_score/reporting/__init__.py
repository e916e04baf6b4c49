"""
Reporting layer — ASCII formatters for CLI output.

Submodules:
  formatters — score breakdown and recommendation list formatters.
"""
