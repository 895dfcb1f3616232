"""Services Layer - record service orchestrating the persistence gateway.

Invariants:
    - Services receive their gateway through the constructor (no ambient globals)
    - Services never build SQL from caller input; core/ decides what is bound

Design Decisions:
    - One service per entity
"""
