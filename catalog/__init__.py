"""Local Library Catalog — author listing service.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
