"""
Package marker for scripts to allow running as a module:

    python3 -m scripts.daylight_hours 35 0

This avoids import issues for 'daylight'.
"""
