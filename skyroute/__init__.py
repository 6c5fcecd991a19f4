"""SkyRoute Application Package — shortest landing path for a satellite-guided drone.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Empty __init__.py: explicit imports only, no star exports
"""
