"""Runtime model — a virtual-clock event loop, event targets and component lifecycle."""
