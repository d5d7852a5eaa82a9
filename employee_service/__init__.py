"""
Employee Service: Application Package Initializer
====================================================

Layered layout:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │      Services (CRUD operations)     │  ← Queries, driver error mapping
    ├─────────────────────────────────────┤
    │     Models & Schemas (Data)         │  ← Document mapping + Pydantic
    ├─────────────────────────────────────┤
    │     Database (Persistence)          │  ← AsyncMongoClient handle
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
