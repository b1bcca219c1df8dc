"""Service layer: wraps the pure domain in ServiceResult-returning operations."""
