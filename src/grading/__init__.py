"""Score grading.

This package maps validated scores onto fixed letter-grade bands.
"""
