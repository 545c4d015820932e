"""stylescope - track active stylesheets on a page and find property usages."""

__version__ = "0.1.0"

from stylescope.checks import CHECKS, PropertyCheck, Usage, find_usages, run_check  # noqa: E402
from stylescope.errors import EmptyCollectionError, StyleScopeError  # noqa: E402
from stylescope.excerpt import extract_source, format_declaration  # noqa: E402
from stylescope.gatherer import STYLES_UNAVAILABLE, StylesGatherer  # noqa: E402
from stylescope.query import filter_by_property  # noqa: E402
from stylescope.tracker import SessionState, StyleSheetTracker, dedupe_by_content  # noqa: E402

__all__ = [
    "__version__",
    "CHECKS",
    "EmptyCollectionError",
    "PropertyCheck",
    "STYLES_UNAVAILABLE",
    "SessionState",
    "StyleScopeError",
    "StyleSheetTracker",
    "StylesGatherer",
    "Usage",
    "dedupe_by_content",
    "extract_source",
    "filter_by_property",
    "find_usages",
    "format_declaration",
    "run_check",
]
