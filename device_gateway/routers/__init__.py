"""HTTP routers for the device gateway."""
