"""Configuration constants.

This module contains truly constant values that should NOT be user-configurable.
For configurable values, see models.py (SearchConfig, RenderConfig, etc.).
"""

# =============================================================================
# Search Maximums
# =============================================================================

SEARCH_MAX_LIMIT = 500
"""Maximum results returned by a single search."""

# =============================================================================
# Version Ordering
# =============================================================================
# Releases sort by major*10000 + minor*100 + patch, so minor and patch
# components must stay below 100 for the ordering to hold.

PRIORITY_MAJOR_WEIGHT = 100 * 100
PRIORITY_MINOR_WEIGHT = 100

# =============================================================================
# Markup
# =============================================================================

HIGHLIGHT_TAG = "search-highlight"
"""Element name wrapping highlighted runs in rendered titles."""
