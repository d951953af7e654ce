"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces,
connecting the application to:
- Trip data storage (CSV files)
- Route solving (Dijkstra)
"""
