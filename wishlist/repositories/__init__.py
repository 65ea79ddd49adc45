"""Row-level data access for users and gifts."""
