"""
Exit codes for Pomodoro CLI.

Semantic exit codes so scripts wrapping the timer can tell why it stopped.
Quitting a session with Ctrl-C is a normal exit and reports SUCCESS.
"""

# Success (session completed or quit by the user)
SUCCESS = 0

# General error (unspecified)
ERROR_GENERAL = 1

# Invalid arguments or configuration (non-positive durations or rounds)
ERROR_INVALID_ARGS = 2

# Terminal is not interactive or cannot be put into cbreak mode
ERROR_TERMINAL = 3
