"""
Office toolkit: conversions between Word, Excel, HTML, plain text and PDF.
"""

__version__ = "0.1.0"
