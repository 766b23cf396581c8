"""Infrastructure: persistence, security, outbound email, background jobs."""
