"""
app/api/routers package marker.
"""

from app.api.routers.quest_import import router as quest_import_router

__all__ = [
    "quest_import_router",
]
