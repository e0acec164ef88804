"""CLI commands for dockpilot."""
