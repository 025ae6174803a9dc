"""Route exports."""

from routes.conversation import router as conversation_router
from routes.summaries import router as summaries_router

__all__ = ["conversation_router", "summaries_router"]
