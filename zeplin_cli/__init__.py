"""Export Zeplin screens as compact layout specs and classified image assets."""

__version__ = "0.1.0"
