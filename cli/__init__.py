"""GoalPad terminal UI."""
