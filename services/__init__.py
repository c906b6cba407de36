"""
services/ - Presentation Logic
==============================
Builds human-readable report lines from the repositories' object graphs.
"""
