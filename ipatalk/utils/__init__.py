"""Utility functions for ipatalk.

This package collects helpers that do not belong to the engine itself:
data-file lookup and the file-backed debug logger.
"""
