"""Core launcher logic: configuration, project scaffolding, installation and delegation."""
