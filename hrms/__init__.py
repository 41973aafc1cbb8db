"""
HRMS Backend - Application Package Initializer
===============================================

What: Marks the `hrms` directory as a Python package.
Who:  Used implicitly by Python's import system and explicitly by pytest and uvicorn.

Architecture Note:
    The service is split into thin layers:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Translation)      │  ← One collection call per operation
    ├─────────────────────────────────────┤
    │     Models & Schemas (Data)         │  ← Document mapping + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← MongoDB client handle
    └─────────────────────────────────────┘

    Routes build the envelope and status codes, services talk to the
    employees collection, and the database handle is created once at
    startup and handed down explicitly.
"""

__version__ = "1.0.0"
