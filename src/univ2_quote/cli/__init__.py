"""Interactive command-line front end."""
