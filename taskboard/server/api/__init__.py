"""HTTP API for Taskboard Server."""
