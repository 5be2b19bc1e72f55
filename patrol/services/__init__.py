"""
High-level use cases for the Patrol API.

Each service module owns one in-memory store and mirrors it to its JSON
document through the DocumentStore. Routers call these services (through
DispatchState) instead of touching the documents directly.
"""
