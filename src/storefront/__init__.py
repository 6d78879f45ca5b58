"""Storefront: catalogue, cart, checkout, inventory ledger and admin tooling."""
