"""Top-level package for the Inn From the Storm data collection.

Collects public-health and criminal-justice statistics and writes them as
static JSON files for the IFTS website.
"""

__version__ = "1.0.0"

__all__ = ["__version__"]
