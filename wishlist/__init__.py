"""Household gift wishlist API."""
