"""Roster fetching, configuration and the MCP/CLI surface for the briefing engine."""
