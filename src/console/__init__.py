"""Interactive console for LiftStep."""
