"""Test suite for the food diary service."""
