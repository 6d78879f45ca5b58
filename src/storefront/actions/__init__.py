"""Storefront actions: identity in, ``Ok | Err`` out."""
