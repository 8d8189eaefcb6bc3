"""
Test helpers package for office toolkit.

Provides utilities and helper functions for testing.
"""

from .files import RecordingTempManager, write_minimal_pdf, write_text_file

__all__ = [
    'RecordingTempManager',
    'write_minimal_pdf',
    'write_text_file',
]
