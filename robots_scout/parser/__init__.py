# File: robots_scout/parser/__init__.py
"""robots_scout.parser: line-level parsing of robots.txt into a RobotsDocument."""
