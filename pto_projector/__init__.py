"""PTO and sick-time balance projector."""
