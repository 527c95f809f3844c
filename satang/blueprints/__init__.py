"""HTTP blueprints for the dashboard API."""
