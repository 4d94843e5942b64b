"""Tree rendering engine.

This package lists, filters, sorts and colors the entries of a directory
hierarchy and writes them out one indented line at a time.
"""
