"""Showroom catalog API."""
