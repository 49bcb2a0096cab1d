"""scenes — Game screens (only the play scene for now)."""
