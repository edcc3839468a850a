"""Student record ingestion.

This package reads delimited text sources and validates each line
into immutable student records.
"""
