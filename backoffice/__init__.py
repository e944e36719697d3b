"""Hospitality back office: inventory and daily stock reconciliation API."""

__version__ = "0.1.0"
