"""
Recommendation view.

Responsibilities:
- Keep the filter selection (categories, radius) and per-request session state.
- Locate the user, call the search proxy and pick a place (single or roulette).
- Drive the map (marker, route line, panorama) through narrow capability protocols.
"""
