"""
Infrastructure adapters.

Each adapter implements a domain port (ABC) and connects
to external systems: the Postgres store, the AI gateway and
market-data HTTP APIs.
"""
