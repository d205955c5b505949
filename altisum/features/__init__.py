"""
Feature modules for altisum.

Each feature is a self-contained module with:
- models.py - State types (frozen dataclasses, enums)
- schemas.py - Pydantic schemas
- service.py - Business logic
"""
