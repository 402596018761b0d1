"""Constant tables shared across Criteria modules."""
