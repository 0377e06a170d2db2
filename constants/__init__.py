"""Session-state and widget key constants."""
