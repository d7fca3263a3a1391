"""Interactive page behaviours — typewriter, cursor, scroll progress, navigation, reveal, tilt."""
