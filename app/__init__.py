"""Budget Tracker MongoDB bootstrap package."""
