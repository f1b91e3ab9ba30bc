"""Starling photo editor: interactive crop-box geometry engine."""
