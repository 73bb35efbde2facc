"""Nightly regeneration and export scheduler."""
