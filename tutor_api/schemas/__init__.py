# Schemas package init
"""
Tutor API — Pydantic Schemas
=============================

What:  Request/response contracts, kept separate from the ORM models so the
       API can change independently of the table layout.
"""
