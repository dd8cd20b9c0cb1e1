"""Client-side list view for browsing cocktails through the BarCraft proxy."""

from .config import ViewerConfig
from .controller import ViewController, ViewState
from .detail_fetcher import DetailFetcher
from .errors import FetchFailed, NotFound, ValidationError
from .filters import FILTER_CATEGORIES, FilterCategory
from .models import Discriminator, PageResult, Record, ViewQuery
from .page_fetcher import PageFetcher
from .presenter import PaginationView, derive
from .transport import RequestsTransport

__all__ = [
    "DetailFetcher",
    "FILTER_CATEGORIES",
    "Discriminator",
    "FetchFailed",
    "FilterCategory",
    "NotFound",
    "PageFetcher",
    "PageResult",
    "PaginationView",
    "Record",
    "RequestsTransport",
    "ValidationError",
    "ViewController",
    "ViewQuery",
    "ViewState",
    "ViewerConfig",
    "derive",
]
