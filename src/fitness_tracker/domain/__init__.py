"""
Domain layer - business logic and rules.

This package contains:
- Entities: User, Training, UserSearch and the ActivityType enumeration
- Validators, search matcher and partial-update merger
- Services: User and Training lifecycle services and their ports
- Exceptions: Domain-specific exceptions
"""
