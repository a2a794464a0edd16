"""HTTP API – routes and the application factory."""
