"""userapi: user resource service (interface, application, domain, infrastructure layers)."""
