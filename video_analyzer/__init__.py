"""
Video Analyzer: YouTube URL to transcript, structured summary and related news.
"""

__version__ = "0.1.0"
