"""Infrastructure: persistence, external providers, security, and service implementations."""
