"""Shared configuration, logging, metrics, types and geocoding primitives."""
