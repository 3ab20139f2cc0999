"""Application layer - Use cases and orchestration.

This layer contains the catalog's use cases following the CQRS pattern:
- Commands: Write operations that change state
- Queries: Read operations that fetch data
- CQRS: handler registry, request dispatcher and the request catalog
- Validators: declarative rule sets per request type

The application layer orchestrates domain logic but contains no storage code.
"""
