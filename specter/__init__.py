"""Histograms and 1D/2D cuts for event-by-event data analysis."""

__version__ = "0.1.0"
__all__ = ["cut", "data_blob", "errors", "histogram", "manager"]