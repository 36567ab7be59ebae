"""Tournament controllers."""
