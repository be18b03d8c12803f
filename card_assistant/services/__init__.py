"""Services: the two gateways, orchestrating validation and collaborator calls.

Invariants:
    - Services depend on core Protocols only; concrete adapters are injected by routes
"""
