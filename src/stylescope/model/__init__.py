from stylescope.model.stylesheet import (
    CSSProperty,
    Declaration,
    SourceRange,
    StyleSheetHeader,
    StyleSheetOrigin,
    StyleSheetRecord,
)

__all__ = [
    "CSSProperty",
    "Declaration",
    "SourceRange",
    "StyleSheetHeader",
    "StyleSheetOrigin",
    "StyleSheetRecord",
]
