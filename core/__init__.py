"""Core package - domain, application, infrastructure and settings layers."""
