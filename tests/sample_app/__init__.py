"""A small pagewire application used by the test suite."""
