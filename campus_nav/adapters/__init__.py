"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces,
connecting the routing core to:
- Campus data sources (in-memory, JSON files)
- Location matching strategies (substring rules)
- Path-finding algorithms (Dijkstra)
"""
