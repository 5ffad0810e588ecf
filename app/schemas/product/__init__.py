"""Product-level schemas."""
