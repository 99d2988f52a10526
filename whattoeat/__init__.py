"""
오늘 뭐 먹지 — location-based restaurant recommender.

Packages:
- search: Kakao keyword-search proxy (merge and dedupe per category).
- view: recommendation flow (single pick or five-way roulette) and its adapters.
"""
