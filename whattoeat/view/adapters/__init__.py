"""
Concrete capability adapters for the recommendation view.

- proxy_client: httpx client for the search proxy endpoint.
- folium_map: folium map canvas with marker, route line and Street View panel.
- streetview: Google Street View metadata lookup for the nearest panorama.
- console: terminal screen, wheel animation and fixed-position geolocation.
"""
