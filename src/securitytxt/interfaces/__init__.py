"""Interfaces: HTTP API and command line."""
