"""
external-game-data — a source-independent model for external game and
achievement data.

Data-source parsers (see ``external_game_data.ingestion``) fill holders from
``external_game_data.models``; consumers read only those holders.
"""

__version__ = "0.1.0"
