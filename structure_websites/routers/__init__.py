# structure_websites/routers/__init__.py
from .structure_websites_router import router as structure_websites_router
from .seo_router import router as seo_router
from .google_reviews_router import router as google_reviews_router
from .health_router import router as health_router

__all__ = ["structure_websites_router", "seo_router", "google_reviews_router", "health_router"]
