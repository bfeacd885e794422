"""Render a per-year commit calendar image from local git repositories."""
