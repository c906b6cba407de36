"""
db/ - Database Layer
====================
Opens PostgreSQL connections, ensures the schema exists and executes raw SQL.
This layer is the lowest in the architecture and has no dependencies on other layers.
"""
