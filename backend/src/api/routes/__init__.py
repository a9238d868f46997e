"""API route modules."""
from api.routes.system import router as system_router
from api.routes.classification import router as classification_router

__all__ = [
    "system_router",
    "classification_router",
]
