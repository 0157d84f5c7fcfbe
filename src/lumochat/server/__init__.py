"""HTTP server for LumoChat."""
