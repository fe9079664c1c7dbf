"""Taskboard Server backend."""
