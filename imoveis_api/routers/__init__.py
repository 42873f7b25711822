"""
FastAPI routers grouped by resource.

Each module exposes an APIRouter included by the application factory
(app.py).
"""
