"""Command-line front end for identiconic."""
