"""
Reporting layer — plain-text debug views of holders.

Submodules:
  formatters — success-path text for game lists, games, achievements, profiles
"""
