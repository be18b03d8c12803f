"""Core Layer: error types, field rules and boundary contracts.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Functions here are pure; IO lives behind the Protocols in repository_protocols
"""
