"""Domain services: login and credential handling."""
