"""Example scripts demonstrating license report generation."""
