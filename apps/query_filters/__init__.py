"""Taxonomy filter controls for interactive post listings."""
