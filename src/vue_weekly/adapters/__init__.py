"""Adapters for external feeds, LLM backends and rendering."""
