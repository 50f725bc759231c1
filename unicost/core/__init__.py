"""Pure calculation functions for the university cost planner."""
