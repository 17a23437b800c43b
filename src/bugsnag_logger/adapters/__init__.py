"""Adapters – concrete NotificationClient implementations."""
