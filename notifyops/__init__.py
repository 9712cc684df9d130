"""
NotifyOps - GitHub issue summaries delivered to Slack.
"""

__version__ = "1.0.0"
