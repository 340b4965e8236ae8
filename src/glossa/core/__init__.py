"""Glossa core: site configuration."""
