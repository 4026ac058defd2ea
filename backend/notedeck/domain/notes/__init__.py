"""
Notes bounded context - Domain layer.

Aggregates:
- Note: a named block of free text owned by a single owner
"""
