"""Service layer: tool registry, admin authorization, metrics catalogue."""
