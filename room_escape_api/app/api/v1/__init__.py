"""Version 1 of the Room Escape API."""
