"""Domain services: authentication, users and gifts."""
