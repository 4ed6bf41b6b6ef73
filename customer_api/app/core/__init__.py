"""Settings, logging and security helpers shared by the application."""
