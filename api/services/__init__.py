"""
High-level use cases for the cars API.

Each service module orchestrates repositories/adapters to implement the
business rules. Routers call these services instead of touching the
database session or the in-memory mirror directly.
"""
