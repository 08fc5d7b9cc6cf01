"""Validation logic: rules and the built-in catalog."""
