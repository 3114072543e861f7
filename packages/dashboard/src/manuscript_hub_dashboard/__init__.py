"""Manuscript Hub Streamlit dashboard.

Author and publisher pages backed by the manuscript REST API.
"""

__version__ = "0.1.0"
