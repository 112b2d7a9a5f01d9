"""Command line interface for Laravel Maker."""
