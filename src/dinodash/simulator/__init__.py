"""Desktop simulator for dinodash."""
