"""Business logic for the Transport Service."""
