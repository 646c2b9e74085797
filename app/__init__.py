"""
TradeJournal: backend for a personal finance and day-trading journal.

Application package root. This is a modular monolith using
hexagonal architecture (ports & adapters).

Bounded contexts:
    - finances: Recurring income/expense templates and the ledger.
    - community: Trending topics and the weekly points ranking.
    - accounts: Trial expiration and user messages.
    - operations: Trading journal imports, deletion and AI strategy tagging.
    - market: Economic indicators and quote overview.

Layers:
    - domain: Pure business logic, entities, ports (ABCs), errors.
    - application: Use cases, DTOs, orchestration.
    - infrastructure: Adapters (Postgres, HTTP APIs) implementing domain ports.
    - interfaces: FastAPI routers, Pydantic schemas.
    - shared: Cross-cutting concerns (errors, security, logging).
"""
