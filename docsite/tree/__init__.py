"""Page-tree data model and snapshot loading."""

from .loader import load_page_tree, load_translation_statuses, parse_page_tree
from .models import (
    DocsiteError,
    DuplicateRouteError,
    Func,
    FuncBody,
    HtmlBody,
    OutlineItem,
    Page,
    PageBody,
    PageNotFoundError,
    PageTree,
    PageTreeBuilder,
    Param,
    StrParam,
    TranslationStatus,
    TreeStructureError,
    TypeBody,
    UnclassifiedTranslationStatusError,
    route_key,
)

__all__ = [
    "DocsiteError",
    "DuplicateRouteError",
    "Func",
    "FuncBody",
    "HtmlBody",
    "OutlineItem",
    "Page",
    "PageBody",
    "PageNotFoundError",
    "PageTree",
    "PageTreeBuilder",
    "Param",
    "StrParam",
    "TranslationStatus",
    "TreeStructureError",
    "TypeBody",
    "UnclassifiedTranslationStatusError",
    "load_page_tree",
    "load_translation_statuses",
    "parse_page_tree",
    "route_key",
]
