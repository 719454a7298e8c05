"""HTTP routes of a pagewire application."""
