"""RERA project analytics.

Aggregates registered real-estate project records into dashboard
summaries and serves them over a small JSON API.
"""
