"""HTTP surface for the Cadence pricing engine."""
