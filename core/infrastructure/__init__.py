"""Infrastructure layer - logging and collaborator adapters."""
