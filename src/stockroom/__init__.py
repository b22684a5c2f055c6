"""Stockroom: stock tracking for a small retail shop floor."""
