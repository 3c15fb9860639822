# =============================================================================
# MSCE/SViz/__init__.py — Signal Visualizer Module
# =============================================================================
#
# Human-readable views of a Signal stream, used by `msce --render` and the
# /morse/render HTTP endpoint.
#
# Sub-modules:
#   signal_view.py — block timeline and dot/dash notation renderers
# =============================================================================
