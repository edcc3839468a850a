"""Report rendering and SDK entry points.

This package formats graded records and writes report files.
"""
