# structure_websites/models/__init__.py
from .template_models import (
    ApplyTemplateRequest,
    ApplyTemplateResult,
    ReconcileResult,
)

from .seo_models import (
    OpenGraphMeta,
    TwitterCardMeta,
    FacebookMeta,
    LinkedInMeta,
    DublinCoreMeta,
    AlternateLanguage,
    SeoPage,
    SeoConfig,
)

from .review_models import (
    Review,
    GoogleReview,
    GoogleReviewsResponse,
)

__all__ = [
    # template_models
    "ApplyTemplateRequest",
    "ApplyTemplateResult",
    "ReconcileResult",
    # seo_models
    "OpenGraphMeta",
    "TwitterCardMeta",
    "FacebookMeta",
    "LinkedInMeta",
    "DublinCoreMeta",
    "AlternateLanguage",
    "SeoPage",
    "SeoConfig",
    # review_models
    "Review",
    "GoogleReview",
    "GoogleReviewsResponse",
]
