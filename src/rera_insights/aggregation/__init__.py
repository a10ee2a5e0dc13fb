"""Aggregation module for project summaries.

- Classifies project status and reduces record batches to summaries
- Forbidden: database access, mutation of input records
"""
