"""Scanning, formatting and rendering engine."""
