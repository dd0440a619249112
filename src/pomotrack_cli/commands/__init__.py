"""Command modules for pomotrack."""
