"""Domain layer - Pure business logic.

This layer contains the Product aggregate, its domain events and the
protocols (ports) the application layer depends on. The domain layer has NO
dependencies on any framework or infrastructure - it is pure Python.

Structure:
- entities/: Domain entities (mutable, have identity)
- errors/: Invariant violation messages
- events/: Domain events (things that happened in the domain)
- protocols/: Repository, publisher and logger interfaces
"""
