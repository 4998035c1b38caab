"""Domain layer - Core business logic, entities, and rules.

This layer contains:
- Entities: Objects with identity and lifecycle (e.g., Order)
- Value Objects: Immutable objects defined by their attributes (e.g., Money, OrderId)
- Domain Services: Stateless operations on domain objects (e.g., price calculation)
- Domain Exceptions: Business rule violations

The domain layer has NO dependencies on external frameworks or infrastructure.
"""
