"""Process-level configuration (settings and logging) for the command-line tools."""
