"""Core probe building, citation detection and aggregation."""
