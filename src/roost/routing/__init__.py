"""Routing — route records, method sets, and duplicate detection.

Routes are registered during startup; each is checked against the
routes already recorded at the same path before it reaches the router.
"""
