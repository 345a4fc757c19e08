"""
CLI Utilities Package
Helper utilities for the CLI
"""
