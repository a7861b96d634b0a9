"""
ArticleHub Backend — Application Package Initializer
====================================================

What: Marks the `articlehub` directory as a Python package.
Who:  Used by uvicorn (`uvicorn articlehub.main:app`) and by pytest.

Architecture Note:
    The backend is split into thin layers:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │     ArticleService (Orchestration)  │  ← id parsing, error translation
    ├─────────────────────────────────────┤
    │   ArticleStore (memory | MongoDB)   │  ← one operation per request
    ├─────────────────────────────────────┤
    │    MongoConnection (Persistence)    │  ← long-lived AsyncMongoClient
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
