"""
Pydantic models describing the entities of a resume aggregate.

Each entity type has a draft model, used to validate raw input before it is
persisted, and a read model, used to snapshot the persisted row.

Notes:
1. Drafts carry no database identifiers; read models carry the generated ones.
2. No disk, network, or database access is performed in this package.
"""
