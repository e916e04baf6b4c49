"""Tier and recommendation taxonomies (constants only, no I/O)."""
