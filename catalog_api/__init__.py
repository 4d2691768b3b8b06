"""Catalog API.

HTTP service for browsing products and managing categories.
"""
