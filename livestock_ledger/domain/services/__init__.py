"""
Domain services for business logic that doesn't belong to a specific entity.

Domain services here are pure functions and stateless classes:
- Digit normalization and tolerant numeric parsing
- Approximate name matching against the registry
- Heuristic field classification
- Row reconciliation into canonical payloads
"""
