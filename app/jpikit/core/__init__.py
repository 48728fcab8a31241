"""Core services: paths, project configuration and console theme."""
