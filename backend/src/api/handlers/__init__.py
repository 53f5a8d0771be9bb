"""
API Handlers

Route handlers (FastAPI routers), one module per resource.

Modules:
========
- health_handler: /health, /ready, /live
- auth_handler: /auth (register, login, token, me)
- user_handler: /users
- item_handler: /items
- note_handler: /notes
- reference_handler: /reference
- events_handler: /ws/notes WebSocket
"""
