"""Infrastructure adapters (database, Redis, SMTP, bcrypt, JWT, logging)."""
