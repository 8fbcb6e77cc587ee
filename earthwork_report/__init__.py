"""Earthwork cross-section volume report."""

__version__ = "1.0.0"
