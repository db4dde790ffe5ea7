# src/reader_kit/observability/names.py

"""Standard metric names for reader-kit observability.

Use these constants instead of hardcoded strings so every component
reports under the same names.

Note: All duration metrics are in milliseconds by convention.
"""

# ============================================================================
# Chapter Detection Metrics
# ============================================================================

# Duration
CHAPTER_DETECTION_DURATION = "chapter_detection_duration"

# Counters
CHAPTERS_DETECTED = "chapters_detected"
CHAPTER_DETECTION_FALLBACKS = "chapter_detection_fallbacks"


# ============================================================================
# Highlight Metrics
# ============================================================================

# Counters
HIGHLIGHTS_CREATED_TOTAL = "highlights_created_total"
HIGHLIGHTS_UPDATED_TOTAL = "highlights_updated_total"
HIGHLIGHTS_DELETED_TOTAL = "highlights_deleted_total"
HIGHLIGHT_ERRORS_TOTAL = "highlight_errors_total"


# ============================================================================
# Article Store Metrics
# ============================================================================

# Gauges
ARTICLES_STORED = "articles_stored"

# Counters
READING_PASS_TOGGLES_TOTAL = "reading_pass_toggles_total"


# ============================================================================
# Template Metrics
# ============================================================================

# Duration
TEMPLATE_RENDER_DURATION = "template_render_duration"

# Counters (labelled by pass)
TEMPLATES_GENERATED_TOTAL = "templates_generated_total"
