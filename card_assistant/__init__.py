"""Card Assistant: HTTP backend for a Hong Kong credit card registry and AI chat.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
