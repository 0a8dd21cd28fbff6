"""In-memory quiz state and the scoreboard event broadcaster."""
