"""Device resolution, command routing and smart-home projection."""
