"""Core infrastructure: XDG paths, configuration, theme, and state."""
