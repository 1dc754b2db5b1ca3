# Routes package init
"""
Tutor API — Routes Package
===========================

What:  HTTP route handlers that accept requests and return responses.

Route Inventory:
    - tutors.py:  POST/PUT/GET /api/tutors, GET/DELETE /api/tutors/{id}
    - health.py:  GET /health (service health check)

Design Principle:
    Routes handle HTTP concerns only: extract the request data, run the
    identifier guard checks, call the repository, and set status codes and
    headers. SQL belongs in repositories.
"""
