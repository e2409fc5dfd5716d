from .discovery import (
    STYLESHEETS_SUBDIR,
    STYLESHEET_SUFFIX,
    Stylesheet,
    discover_stylesheets,
    select_stylesheet,
    stylesheet_search_dirs,
    stylesheets_explore_dir,
)

__all__ = [
    "STYLESHEETS_SUBDIR",
    "STYLESHEET_SUFFIX",
    "Stylesheet",
    "discover_stylesheets",
    "select_stylesheet",
    "stylesheet_search_dirs",
    "stylesheets_explore_dir",
]
