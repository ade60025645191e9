"""Common literal values used across sitenav.

These tables keep the recognized option names, plugin aliases, and link
schemes in one place so the normalizer, validator, writers, and tests import
the same values without drifting.

Examples
--------
>>> from sitenav import _constants
>>> _constants.PLUGIN_FACTORY_NAMES["searchPlugin"]
'@vuepress/plugin-search'
>>> "activeHeaderLinks" in _constants.DEFAULT_THEME_OPTIONS
True
"""

EXTERNAL_SCHEMES = ("http", "https", "mailto", "tel", "ftp")
HOSTLESS_SCHEMES = frozenset({"mailto", "tel"})

DEFAULT_THEME_FACTORY = "defaultTheme"
DEFAULT_DESTINATION = ".vuepress/dist"

DEFAULT_THEME_OPTIONS = frozenset(
    {
        "activeHeaderLinks",
        "colorMode",
        "colorModeSwitch",
        "contributors",
        "displayAllHeaders",
        "docsBranch",
        "docsDir",
        "docsRepo",
        "editLink",
        "editLinkText",
        "lastUpdated",
        "logo",
        "repo",
        "repoLabel",
        "search",
        "searchMaxSuggestions",
        "sidebar",
        "sidebarDepth",
        "smoothScroll",
    }
)

SEARCH_PLUGIN = "@vuepress/plugin-search"

DEFAULT_PLUGIN_OPTIONS: dict[str, frozenset[str]] = {
    SEARCH_PLUGIN: frozenset(
        {
            # 1.x option names
            "searchMaxSuggestions",
            "searchHotkeys",
            "test",
            # 2.x option names
            "locales",
            "hotKeys",
            "maxSuggestions",
            "isSearchable",
            "getExtraFields",
        }
    ),
    "@vuepress/plugin-active-header-links": frozenset(
        {"sidebarLinkSelector", "headerAnchorSelector"}
    ),
    "@vuepress/plugin-back-to-top": frozenset(),
    "@vuepress/plugin-medium-zoom": frozenset({"selector", "zoomOptions", "delay"}),
    "@vuepress/plugin-nprogress": frozenset(),
}

PLUGIN_FACTORY_NAMES: dict[str, str] = {
    "searchPlugin": SEARCH_PLUGIN,
    "activeHeaderLinksPlugin": "@vuepress/plugin-active-header-links",
    "backToTopPlugin": "@vuepress/plugin-back-to-top",
    "mediumZoomPlugin": "@vuepress/plugin-medium-zoom",
    "nprogressPlugin": "@vuepress/plugin-nprogress",
}

VUEPRESS_SCOPE = "@vuepress/"
PLUGIN_PREFIX = "plugin-"

INDEX_DOCUMENTS = ("README.md", "index.md")
