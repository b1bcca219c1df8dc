"""Pure calendar logic: dates, durations, and duration formatting."""
