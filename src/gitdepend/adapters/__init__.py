"""Adapters for the external tools GitDepend drives."""
