"""Platform services: filesystem persistence and logging."""
