"""Application layer - Use cases and port definitions.

This layer contains:
- Use Cases: Order lifecycle orchestration (create, query, pay, deliver)
- Ports: Abstract interfaces (protocols) for external dependencies
- DTOs: Data transfer objects for use case input/output
- Authorization: Checks on the externally supplied principal

The application layer depends only on the domain layer.
Infrastructure implementations are injected via ports.
"""
