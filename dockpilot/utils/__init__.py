"""Utility modules for dockpilot."""
