"""Lambda handlers for the Gamocracy Blog and Post tables."""
