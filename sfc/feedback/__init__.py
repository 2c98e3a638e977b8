"""Feedback: submission pipeline, enrichment and the moderator review workflow.

Modules:
- ``models`` -- the feedback record and its review states
- ``enrichment`` -- sentiment / key phrase / language enrichment with fallbacks
- ``pipeline`` -- classify, decide, enrich and persist new submissions
- ``review`` -- approve / reject transitions and review-queue queries
"""
