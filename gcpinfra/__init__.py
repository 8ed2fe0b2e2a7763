"""Data model for GCP cluster infrastructure resources: v1alpha4 resources and labels, and network types for v1alpha3 and v1alpha4."""

__version__ = "0.1.0"