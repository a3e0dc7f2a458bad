"""Checkout integration: delivery metadata on payment sessions."""
