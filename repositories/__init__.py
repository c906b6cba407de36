"""
repositories/ - Data Access Layer
==================================
Each repository owns the SQL for one root entity type.
Repositories receive flat rows from the database, decode them into model
objects and fold joined rows into object graphs through `mapping`.
"""
