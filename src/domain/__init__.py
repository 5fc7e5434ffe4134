"""
Domain Layer - Pure Business Logic

This layer contains:
- Entities: Core business objects with identity
- Value Objects: Immutable, self-validating employee data
- Exceptions: Business rule violations

No external dependencies allowed in this layer.
"""
