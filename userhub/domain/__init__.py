"""
Domain Layer - Pure Business Logic

This layer contains:
- Common: Result type and strongly-typed identifiers
- Entities: Core business objects with identity
- Value Objects: Immutable objects without identity

No external dependencies allowed in this layer.
"""
