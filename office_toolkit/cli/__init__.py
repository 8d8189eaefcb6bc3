"""
Command-line interfaces: office-convert, office-excel and office-word.
"""
