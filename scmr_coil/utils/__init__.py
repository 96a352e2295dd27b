"""Physical constants, unit conversions and logging setup."""
