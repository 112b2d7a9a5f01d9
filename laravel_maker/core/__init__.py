"""Core provisioning functionality for Laravel Maker."""
