"""Runtime services (telemetry) shared across the package."""
