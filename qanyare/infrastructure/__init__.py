"""
Infrastructure Layer

Contains all external dependencies and implementations:
- Database models and repository implementations
- Configuration management
- Logging infrastructure
- Security helpers
"""
