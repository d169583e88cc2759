"""Support helpers — dotted-path mapping access and slug generation."""
