"""Core configuration, logging and pricing rules."""
