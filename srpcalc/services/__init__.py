"""Services Layer — orchestration between the pure core and side-effecting adapters.

Invariants:
    - Services receive capability implementations by injection, never construct IO themselves
"""
