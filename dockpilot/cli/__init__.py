"""Command-line interface for dockpilot."""
