"""Feature packages built on top of the path policy."""
