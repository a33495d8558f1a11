"""Infrastructure Layer — side-effecting adapters and cross-cutting concerns.

Invariants:
    - Infrastructure implements core Protocols; core never imports from here
    - All OS failures mapped to typed errors from core/errors.py
"""
