"""HTTP blueprints for the housekeeping service."""
