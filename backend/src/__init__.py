"""
Primer Backend

A study companion API for web API fundamentals.

Package Structure:
==================
    src/
    ├── api/        ← FastAPI application (HTTP + WebSocket)
    ├── worker/     ← Background note processing
    ├── shared/     ← Shared code (models, services, etc.)
    └── config/     ← Configuration

Running the Application:
========================
    # API Server
    uvicorn src.api.main:app --reload

    # Or through the console script
    primer-api
"""
