"""HTTP-facing helpers shared by the routes."""
