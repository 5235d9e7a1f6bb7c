"""Sector-based portfolio allocation calculator with a Streamlit dashboard."""

__version__ = "0.1.0"
