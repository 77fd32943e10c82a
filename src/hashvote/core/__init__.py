"""Core configuration, error kinds and client identity helpers."""
