"""Client for the external place-search (geocoding) service."""
