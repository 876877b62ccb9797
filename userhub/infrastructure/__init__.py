"""Infrastructure Layer for the user service.

This module provides concrete implementations of the application layer interfaces:
- database: psycopg3 connection pool, query adapter and table definitions
- repositories: PostgreSQL and in-memory repositories with their units of work
- logging: root logger configuration
- container: dependency wiring and resource lifecycle

Example usage:
    from userhub.infrastructure.container import Container
    from userhub.application.use_cases import CreateUserRequest

    async with Container() as container:
        use_case = container.create_user_use_case()
        result = await use_case.execute(
            CreateUserRequest(name="Test User", email="test@example.com")
        )
"""
