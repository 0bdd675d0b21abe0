"""Domain layer for lalurecf application."""
