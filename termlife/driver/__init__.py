"""Terminal driver: frame pacing, screen output and the run loop."""
