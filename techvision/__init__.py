"""TechVision site backend and analytics proxy."""
