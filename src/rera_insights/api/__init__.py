"""API module for RERA insights.

- Validates inputs, reads the project store
- Returns summary payloads for the dashboard
- Forbidden: aggregation logic beyond calling the engine
"""
