"""HTTP service for the line chart."""
