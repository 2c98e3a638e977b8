"""SFC — Smart Feedback Collector.

Screens submitted feedback for unsafe content, enriches safe feedback with
sentiment, key-phrase and language analysis, and routes everything through
a moderator approval workflow.
"""

__version__ = "0.1.0"
