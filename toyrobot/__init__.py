"""Toy Robot: a command interpreter for a robot on a 5x5 table."""
