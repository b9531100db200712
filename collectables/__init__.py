"""Collectables - item pickup, inventory ledger and hotbar slots."""

__version__ = "0.1.0"
