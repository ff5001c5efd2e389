"""HTTP surface for LiftStep."""
