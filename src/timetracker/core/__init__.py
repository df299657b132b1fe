"""Timer state machine and unit conversion engine."""
