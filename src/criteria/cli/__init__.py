"""Command line interface for Criteria."""
