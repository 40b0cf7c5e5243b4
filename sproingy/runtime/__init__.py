"""Viewer runtime: configuration, logging, session and frame loop."""
