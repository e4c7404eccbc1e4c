"""
Core functionality for the video analyzer.

This package contains modules for resolving YouTube URLs, fetching
metadata and transcripts, summarizing, finding related news and the
pipeline that ties them together.
"""
