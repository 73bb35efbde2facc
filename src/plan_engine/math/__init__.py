"""Training math: zones, unit conversions, periodization and plan load."""
