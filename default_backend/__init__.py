"""
Custom error pages: default backend for an upstream reverse proxy.

Application package root. The proxy forwards failed requests here and
this service answers them with a static error document chosen from the
request headers (status code, desired format).

Layers:
    - domain: Pure resolution logic, entities, ports (ABCs), errors.
    - application: Use cases, DTOs, orchestration.
    - infrastructure: Adapters (MIME table, filesystem) implementing domain ports.
    - interfaces: FastAPI routers and the streaming error page response.
    - shared: Cross-cutting concerns (errors, logging).
"""
