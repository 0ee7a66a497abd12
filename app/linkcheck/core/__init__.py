"""Core logic: interpolation, exclusion matching and config file I/O."""
