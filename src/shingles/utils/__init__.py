"""Small helpers shared by the windowers and the command line."""
