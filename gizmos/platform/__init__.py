"""Windowing backends driving the per-frame gizmos update."""
