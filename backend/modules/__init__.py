"""
Feature modules for the MiniLearn core.

Each module is self-contained with its own:
- interfaces.py: Protocol definitions for the module's public API
- models.py: Pydantic models and enums
- service.py: Business logic implementation
- exceptions.py: Module-specific exceptions (where the module raises any)

Modules communicate through interfaces, not concrete implementations.
"""
