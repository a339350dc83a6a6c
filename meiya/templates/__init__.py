"""Template unit discovery."""
