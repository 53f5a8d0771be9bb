"""
Worker Module

Background processing for Primer. Pipelines are scheduled as FastAPI
background tasks by the API handlers and open their own database sessions.
"""
