"""Constant tables shared across OpenSkills modules."""
