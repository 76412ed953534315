"""SQL scanning and metadata extraction.

The extractors here are hand-written scanners over raw SQL text. They support a restricted "simple
statement" dialect and never attempt full grammar parsing.
"""
