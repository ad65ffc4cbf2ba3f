"""
Service layer abstraction.

Each service encapsulates business logic for a domain.  Storage is
kept behind ``UserStore`` so that the in-memory list could later be
replaced without changing API handlers.
"""
