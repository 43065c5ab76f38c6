"""
Persistence adapters.

sql_repository talks to the database; car_mirror keeps the in-process copy
that serves reads. Services depend on these instead of opening sessions.
"""
