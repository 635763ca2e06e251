"""Utilities for chunkcache."""
