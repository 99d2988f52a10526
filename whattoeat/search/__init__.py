"""
Search proxy package.

Responsibilities:
- Hold Kakao Local API configuration and credentials.
- Issue one keyword search per requested category.
- Merge the per-category results and drop duplicate places by id.
"""
